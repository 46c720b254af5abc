from tinybencode.__main__ import dump_lines, format_bytes, main


def write(tmp_path, data):
    path = tmp_path / "test.torrent"
    path.write_bytes(data)
    return str(path)


def test_ok(tmp_path, capsys):
    path = write(tmp_path, b"d3:bar4:spam3:fooi42ee")
    assert main([path]) == 0
    assert capsys.readouterr().out == "%s: ok\n" % path


def test_non_compliant(tmp_path, capsys):
    path = write(tmp_path, b"d3:fooi0e3:bar3:abce")
    assert main([path]) == 2
    err = capsys.readouterr().err
    assert "Out of order dictionary entry 'bar' at offset 9" in err


def test_lenient_output(tmp_path, capsys):
    path = write(tmp_path, b"d3:fooi0e3:bar3:abce")
    output = tmp_path / "canonical.torrent"
    assert main([path, "--lenient", "--output", str(output)]) == 0
    assert output.read_bytes() == b"d3:bar3:abc3:fooi0ee"


def test_dump(tmp_path, capsys):
    path = write(tmp_path, b"d3:bar4:spam3:fooli42e2:\xff\x00ee")
    assert main([path, "--dump"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "{",
        "  'bar': 'spam'",
        "  'foo': [",
        "    42",
        "    <2 bytes: ff00>",
        "  ]",
        "}",
        "%s: ok" % path,
    ]


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.torrent")]) == 1
    assert "missing.torrent" in capsys.readouterr().err


def test_format_bytes():
    assert format_bytes(b"text") == "'text'"
    assert format_bytes(b"\x00" * 30) == "<30 bytes: %s...>" % ("00" * 20)


def test_dump_lines():
    assert list(dump_lines([])) == ["[", "]"]
    assert list(dump_lines(7)) == ["7"]
