from pathlib import Path

import pytest

from bytetools import cli


def test_encode_file(tmp_path: Path, capsys):
    source = tmp_path / "data.bin"
    source.write_bytes(bytes([0xBA, 0xAD, 0xF0, 0x0D]))

    cli.main(["encode", str(source)])
    assert capsys.readouterr().out == "BAADF00D\n"

    cli.main(["encode", str(source), "--lower"])
    assert capsys.readouterr().out == "baadf00d\n"


def test_encode_missing_file_exits(tmp_path: Path):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["encode", str(tmp_path / "missing.bin")])
    assert exc_info.value.code == 1


def test_decode_to_file(tmp_path: Path):
    output = tmp_path / "out.bin"
    cli.main(["decode", "baadF00D", "-o", str(output)])
    assert output.read_bytes() == bytes([0xBA, 0xAD, 0xF0, 0x0D])


@pytest.mark.parametrize("text", ["ABC", "ZZ"])
def test_decode_invalid_exits(tmp_path: Path, text: str, caplog):
    output = tmp_path / "out.bin"
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["decode", text, "-o", str(output)])

    assert exc_info.value.code == 1
    assert not output.exists()
    assert "Error:" in caplog.text


def test_size_nested(sample_tree: Path, capsys):
    cli.main(["size", str(sample_tree)])
    out = capsys.readouterr().out
    assert "Directory size: 125 bytes" in out
    assert "Strategy: nested" in out
    assert "Skipped" not in out


def test_size_human(tmp_path: Path, capsys):
    (tmp_path / "big").write_bytes(b"\x00" * 1536)
    cli.main(["size", str(tmp_path), "--strategy", "nested", "--human"])
    assert "Directory size: 1.5 KB" in capsys.readouterr().out


def test_size_flat(sample_tree: Path, capsys):
    cli.main(["size", str(sample_tree), "--strategy", "flat"])
    assert "Strategy: flat" in capsys.readouterr().out


def test_size_missing_directory_exits(tmp_path: Path):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["size", str(tmp_path / "nope")])
    assert exc_info.value.code == 1


def test_unknown_strategy_is_rejected_by_parser(tmp_path: Path):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["size", str(tmp_path), "--strategy", "bogus"])
    assert exc_info.value.code == 2
