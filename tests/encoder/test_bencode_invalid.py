import io
import math

from pytest import mark, raises

from tinybencode import (
    INT64_MAX,
    INT64_MIN,
    UNSUPPORTED_VALUE,
    BencodeSerializable,
    EncodingError,
    encode,
)


def dummy():
    pass


@mark.parametrize(
    "value",
    [
        dummy,
        lambda: None,
        1.2,
        -0.5,
        float("inf"),
        float("-inf"),
        1e300,
        INT64_MAX + 1,
        INT64_MIN - 1,
        None,
        {1, 2},
        object(),
        io.BytesIO(b"data"),
    ],
)
def test_unsupported(value):
    with raises(EncodingError) as excinfo:
        encode(value)
    assert str(excinfo.value) == UNSUPPORTED_VALUE
    assert excinfo.value.value is value


def test_nan():
    with raises(EncodingError) as excinfo:
        encode(float("nan"))
    assert math.isnan(excinfo.value.value)


def test_file_handle(tmp_path):
    path = tmp_path / "data"
    path.write_bytes(b"")
    with open(path, "rb") as handle:
        with raises(EncodingError) as excinfo:
            encode(handle)
        assert excinfo.value.value is handle


def test_nested_unsupported():
    with raises(EncodingError) as excinfo:
        encode({"a": [1, 2, 3.5]})
    assert excinfo.value.value == 3.5


def test_unsupported_key():
    key = (1, 2)
    with raises(EncodingError) as excinfo:
        encode({key: 1})
    assert excinfo.value.value is key


def test_colliding_keys():
    value = {1: "int", "1": "str"}
    with raises(EncodingError) as excinfo:
        encode(value)
    assert excinfo.value.value is value


class Itself(BencodeSerializable):
    def bencode_serialize(self):
        return self


class Other(BencodeSerializable):
    def __init__(self):
        self.other = None

    def bencode_serialize(self):
        return self.other


def test_self_serializing():
    value = Itself()
    with raises(EncodingError) as excinfo:
        encode([value])
    assert excinfo.value.value is value
    assert str(excinfo.value) == UNSUPPORTED_VALUE


def test_serializable_cycle():
    first, second = Other(), Other()
    first.other, second.other = second, first
    with raises(EncodingError) as excinfo:
        encode({"a": first})
    assert excinfo.value.value is first


def test_serializable_returning_none():
    with raises(EncodingError) as excinfo:
        encode(Other())
    assert excinfo.value.value is None
