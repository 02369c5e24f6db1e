import json

import pytest

from cavern.dungeon import Dungeon
from cavern.dungeon.errors import InfeasibleInterConnectivityError
from cavern.logging_utils import current_level, get_logger


def test_key_value_lines_go_to_stderr(monkeypatch, capsys):
    monkeypatch.setenv("CAVERN_LOG_LEVEL", "info")
    get_logger("cavern.test").info(event="hello", note="two words", count=3)
    out, err = capsys.readouterr()
    assert out == ""
    assert "level=info" in err
    assert "event=hello" in err
    assert "note=two_words" in err
    assert "count=3" in err
    assert "logger=cavern.test" in err


def test_level_filter(monkeypatch, capsys):
    monkeypatch.setenv("CAVERN_LOG_LEVEL", "warn")
    log = get_logger("cavern.test")
    log.info(event="hidden")
    log.warn(event="shown")
    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "event=shown" in err


def test_unknown_level_defaults_to_info(monkeypatch):
    monkeypatch.setenv("CAVERN_LOG_LEVEL", "chatty")
    assert current_level() == 20


def test_json_mode(monkeypatch, capsys):
    monkeypatch.setenv("CAVERN_LOG_LEVEL", "debug")
    monkeypatch.setenv("CAVERN_LOG_JSON", "1")
    get_logger("cavern.test").debug(event="structured", skipped=None, coord=(1, 2))
    rec = json.loads(capsys.readouterr().err.strip())
    assert rec["event"] == "structured"
    assert rec["level"] == "debug"
    assert "skipped" not in rec
    assert rec["coord"] == [1, 2]


def test_get_logger_caches():
    assert get_logger("cavern.same") is get_logger("cavern.same")


def test_build_logs_ready_event(monkeypatch, capsys):
    monkeypatch.setenv("CAVERN_LOG_LEVEL", "info")
    Dungeon.generate(rows=3, cols=4, seed=21)
    err = capsys.readouterr().err
    assert "event=dungeon_build_start" in err
    assert "event=dungeon_build_ready" in err
    assert "seed=21" in err


def test_build_failure_logged_with_code(capsys):
    with pytest.raises(InfeasibleInterConnectivityError):
        Dungeon.generate(rows=3, cols=4, interconnectivity=50, seed=21)
    err = capsys.readouterr().err
    assert "event=dungeon_build_failed" in err
    assert "code=infeasible_interconnectivity" in err


def test_debug_level_logs_each_phase(monkeypatch, capsys):
    monkeypatch.setenv("CAVERN_LOG_LEVEL", "debug")
    Dungeon.generate(rows=3, cols=4, seed=21)
    err = capsys.readouterr().err
    for phase in ("validating", "selecting_edges", "placing_treasure"):
        assert f"phase={phase}" in err
