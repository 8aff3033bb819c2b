from __future__ import annotations

import logging
import runpy
import sys
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "tile_info.py"


@pytest.fixture
def tile_info(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.setenv("SLIPPY_LOGS_DIR", str(tmp_path))
    monkeypatch.delenv("SLIPPY_ZOOM", raising=False)
    monkeypatch.delenv("SLIPPY_LOG_LEVEL", raising=False)
    ns = runpy.run_path(str(SCRIPT), run_name="tile_info_under_test")
    yield ns
    logger = logging.getLogger("tile_info")
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()


def _log_text(tmp_path: Path) -> str:
    return (tmp_path / "tile_info.log").read_text(encoding="utf-8")


def test_tile_info_from_lonlat(tile_info, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(sys, "argv", ["tile_info.py", "--lon", "12.3046875", "--lat", "45.460130637921", "--zoom", "13"])

    assert tile_info["main"]() == 0

    text = _log_text(tmp_path)
    assert "Zoom: 13" in text
    assert "tile=(4376, 2932)" in text
    assert "parent z=12: (2188, 1466)" in text
    assert "children z=14: (8752, 5864), (8753, 5864), (8752, 5865), (8753, 5865)" in text


def test_tile_info_from_tile_uses_config_zoom(tile_info, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(sys, "argv", ["tile_info.py", "--x", "0", "--y", "0"])

    assert tile_info["main"]() == 0

    text = _log_text(tmp_path)
    assert "Zoom: 15" in text
    assert "tile=(0, 0)" in text


def test_tile_info_bad_arguments(tile_info, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(sys, "argv", ["tile_info.py", "--lon", "east", "--lat", "45"])

    assert tile_info["main"]() == 2
    assert "Bad arguments" in _log_text(tmp_path)


def test_tile_info_missing_arguments(tile_info, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(sys, "argv", ["tile_info.py"])

    assert tile_info["main"]() == 2
    assert "either --lon/--lat or --x/--y is required" in _log_text(tmp_path)
