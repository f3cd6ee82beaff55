from __future__ import annotations

import csv
import io
from pathlib import Path

import pytest

from mc_chat_export.cli import main


def test_cli_defaults_to_text_with_all_messages(tmp_path: Path, write_chat_log, capsys) -> None:
    log = tmp_path / "latest.log"
    write_chat_log(log)
    out = tmp_path / "chat.txt"

    main(["-i", str(log), "-o", str(out), "--workers", "2"])

    assert len(out.read_text(encoding="utf-8").splitlines()) == 5
    assert "Wrote 5 message(s)" in capsys.readouterr().out


def test_cli_csv_with_selection(tmp_path: Path, write_chat_log) -> None:
    log = tmp_path / "latest.log"
    write_chat_log(log)
    out = tmp_path / "chat.csv"

    main(["-i", str(log), "-o", str(out), "-f", "csv", "--select", "3,0"])

    with out.open(newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows == [
        ["date", "time", "msg"],
        ["", "16:53:44", "<Alice> anyone up?"],
        ["", "16:54:01", '<Bob> ok, "3" of them'],
    ]


def test_cli_interactive(
    tmp_path: Path, write_chat_log, monkeypatch: pytest.MonkeyPatch, capsys
) -> None:
    log = tmp_path / "latest.log"
    write_chat_log(log)
    out = tmp_path / "chat.txt"
    monkeypatch.setattr("sys.stdin", io.StringIO("1-2\n"))

    main(["-i", str(log), "-o", str(out), "--interactive"])

    assert out.read_text(encoding="utf-8") == (
        "[16:53:50] <Bob> yo\n[16:53:52] <Alice> bring <beds> pls\n"
    )
    assert "What messages do you want to render?" in capsys.readouterr().err


def test_cli_missing_input_exits_1(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["-i", str(tmp_path / "nope.log"), "-o", str(tmp_path / "chat.txt")])
    assert exc.value.code == 1
    assert "Log file not found" in capsys.readouterr().err


def test_cli_out_of_range_selection_exits_1(tmp_path: Path, write_chat_log, capsys) -> None:
    log = tmp_path / "latest.log"
    write_chat_log(log)
    out = tmp_path / "chat.txt"

    with pytest.raises(SystemExit) as exc:
        main(["-i", str(log), "-o", str(out), "--select", "0,9"])

    assert exc.value.code == 1
    assert "out of range" in capsys.readouterr().err
    assert not out.exists()


def test_cli_no_chat_messages_exits_1(tmp_path: Path, capsys) -> None:
    log = tmp_path / "latest.log"
    log.write_text("[16:53:40] [Render thread/INFO]: [CHAT] Alice joined the game\n", encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        main(["-i", str(log), "-o", str(tmp_path / "chat.png"), "-f", "image"])

    assert exc.value.code == 1
    assert "Nothing to render" in capsys.readouterr().err


def test_cli_rejects_bad_selection_spec(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["-i", "x.log", "-o", "y.txt", "--select", "a,b"])
    assert exc.value.code == 2
