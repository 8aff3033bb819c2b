from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Config:
    repo_root: Path

    # None => read from SLIPPY_* env vars
    zoom: int = None        # type: ignore[assignment]
    log_level: str = None   # type: ignore[assignment]
    logs_dir: Path = None   # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.zoom is None:
            raw = os.getenv("SLIPPY_ZOOM", "15").strip()
            try:
                zoom = int(raw)
            except ValueError:
                raise ValueError(f"SLIPPY_ZOOM must be an integer (got {raw!r})") from None
            object.__setattr__(self, "zoom", zoom)

        if self.log_level is None:
            object.__setattr__(self, "log_level", os.getenv("SLIPPY_LOG_LEVEL", "INFO").strip() or "INFO")

        if self.logs_dir is None:
            raw = os.getenv("SLIPPY_LOGS_DIR", str(self.repo_root / "logs"))
            object.__setattr__(self, "logs_dir", Path(raw).expanduser().resolve())
