"""Tests for the command line entry point."""
import json

from weather_app import cli
from weather_app.tests.test_data import FakeClient


def test_history_list_empty(tmp_path, capsys):
    path = tmp_path / "history.json"
    assert cli.main(["--history-file", str(path), "history"]) == 0
    assert "최근 검색 기록이 없습니다." in capsys.readouterr().out


def test_history_remove_and_clear(tmp_path, capsys):
    path = tmp_path / "history.json"
    path.write_text(json.dumps({"weatherSearchHistory": json.dumps(["서울", "부산"])}), encoding="utf-8")

    assert cli.main(["--history-file", str(path), "history", "remove", "--index", "0"]) == 0
    assert "0. 부산" in capsys.readouterr().out

    assert cli.main(["--history-file", str(path), "history", "clear"]) == 0
    saved = json.loads(path.read_text(encoding="utf-8"))
    assert json.loads(saved["weatherSearchHistory"]) == []


def test_search_prints_forecast_and_outfit(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr(cli, "ProxyClient", lambda base_url: FakeClient())
    path = tmp_path / "history.json"

    assert cli.main(["--history-file", str(path), "search", "서울"]) == 0
    out = capsys.readouterr().out
    assert "서울의 날씨" in out
    assert "[AI]" in out


def test_search_failure_exit_code(tmp_path, monkeypatch):
    from weather_app.core.errors import InvalidInputError

    monkeypatch.setattr(
        cli, "ProxyClient", lambda base_url: FakeClient(translation=InvalidInputError("invalid"))
    )
    assert cli.main(["--history-file", str(tmp_path / "h.json"), "search", "바보"]) == 1
