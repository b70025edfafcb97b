# tests/test_cli.py
import io

import pytest

from hexlit import APP_TITLE, HOMEPAGE, __version__
from hexlit.cli import main


def test_cli_hex_output(capsys):
    assert main(["0A", "0B", "0C0d"]) == 0
    out = capsys.readouterr().out
    assert "Bytes: 0A 0B 0C 0D" in out
    assert "Length: 4" in out


def test_cli_quoted_literal(capsys):
    assert main(["0F 03-0B 0C-0d 0E"]) == 0
    assert "Bytes: 0F 03 0B 0C 0D 0E" in capsys.readouterr().out


def test_cli_list_format(capsys):
    assert main(["--format", "list", "E5_E6|90-92"]) == 0
    assert capsys.readouterr().out.strip() == "[0xE5, 0xE6, 0x90, 0x92]"


def test_cli_raw_format(capsysbinary):
    assert main(["--format", "raw", "0a0b"]) == 0
    assert capsysbinary.readouterr().out == b"\x0a\x0b"


def test_cli_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("01 02\n03 04\n"))
    assert main([]) == 0
    assert "Bytes: 01 02 03 04" in capsys.readouterr().out


@pytest.mark.parametrize("bad,needle", [("0A 0", "even number"), ("0G", "Invalid hex digit")])
def test_cli_errors(capsys, bad, needle):
    assert main([bad]) == 2
    err = capsys.readouterr().err
    assert err.startswith("error:")
    assert needle in err


def test_cli_version(capsys):
    assert main(["--version"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == APP_TITLE
    assert out[1] == f"Version {__version__}"
    assert out[3] == HOMEPAGE


def test_cli_undecodable_argv_byte(capsys):
    # argv bytes that are not UTF-8 arrive as lone surrogates
    assert main(["0A\udcff0"]) == 2
    err = capsys.readouterr().err
    assert err.startswith("error:")
    assert "0xFF at position 2" in err
