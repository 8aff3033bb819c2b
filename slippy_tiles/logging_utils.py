# MIT License
#
# Copyright (c) 2025 Jonas Waldeck
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND.

from __future__ import annotations

import logging
import sys
import time
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional


class _UTCZFormatter(logging.Formatter):
    # Produces: 2026-01-03T18:43:55.067Z
    converter = time.gmtime

    def formatTime(self, record, datefmt=None):
        t = self.converter(record.created)
        base = time.strftime("%Y-%m-%dT%H:%M:%S", t)
        return f"{base}.{int(record.msecs):03d}Z"


def setup_logger(
    name: str,
    logs_dir: Optional[Path],
    level: str = "INFO",
    to_console: bool = True,
) -> logging.Logger:
    """
    Configure a named logger for scripts using slippy_tiles.

    Writes <logs_dir>/<name>.log, rotated daily (UTC) with 14 backups.
    logs_dir=None skips the file handler. Calling again replaces the handlers.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False

    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    fmt = _UTCZFormatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

    if logs_dir is not None:
        logs_dir.mkdir(parents=True, exist_ok=True)
        fh = TimedRotatingFileHandler(
            str(logs_dir / f"{name}.log"),
            when="D",
            interval=1,
            backupCount=14,
            encoding="utf-8",
            utc=True,
        )
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    if to_console:
        ch = logging.StreamHandler(sys.stdout)
        ch.setFormatter(fmt)
        logger.addHandler(ch)

    return logger
