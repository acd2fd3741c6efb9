from __future__ import annotations

import json
from pathlib import Path

import pytest

from smart_logger.cli import main


def test_demo_prints_samples_and_cache_size(capsys: pytest.CaptureFixture[str]) -> None:
    main(["demo", "--repeat", "3", "--no-color"])
    out = capsys.readouterr().out

    assert out.count("[INFO] Class: 'cli', Method: '_emit_samples'") == 9
    assert "Player John scored 100 points" in out
    assert "'dividing the score' - Exception: division by zero" in out
    assert "<color" not in out
    assert out.rstrip().endswith("Cache size: 6/1000")


def test_demo_release_is_silent(capsys: pytest.CaptureFixture[str]) -> None:
    main(["demo", "--release"])
    out = capsys.readouterr().out
    assert out.strip() == "Cache size: 0/1000"


def test_demo_release_with_enable_in_build(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "logger.json"
    path.write_text(json.dumps({"enable_in_build": True, "max_cache_size": 50}), encoding="utf-8")

    main(["demo", "--release", "--config", str(path)])
    out = capsys.readouterr().out
    assert "[WARNING]" in out
    assert out.rstrip().endswith("Cache size: 6/50")


def test_config_prints_effective_settings(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "logger.json"
    path.write_text(json.dumps({"minimum_severity": "important"}), encoding="utf-8")

    main(["config", "--config", str(path)])
    data = json.loads(capsys.readouterr().out)
    assert data["minimum_severity"] == 1
    assert data["max_cache_size"] == 1000


def test_invalid_config_exits_2(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "logger.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        main(["config", "--config", str(path)])
    assert exc.value.code == 2
    assert "Error:" in capsys.readouterr().err


def test_repeat_must_be_positive() -> None:
    with pytest.raises(SystemExit):
        main(["demo", "--repeat", "0"])
