from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from .config import Settings, load_settings, ensure_dirs


class JsonLineFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.now(timezone.utc).replace(tzinfo=None).isoformat(timespec="seconds") + "Z",
            "lvl": record.levelname,
            "name": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(name: str = "reservoir_sample", settings: Settings | None = None) -> logging.Logger:
    s = settings or load_settings()
    ensure_dirs(s)
    logger = logging.getLogger(name)
    logger.setLevel(s.log_level)
    logger.handlers[:] = []

    # stderr; stdout belongs to the sampled lines
    sh = logging.StreamHandler(sys.stderr)
    sh.setFormatter(JsonLineFormatter())
    logger.addHandler(sh)

    if s.log_dir is not None:
        log_file = Path(s.log_dir) / f"{name}.log"
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(JsonLineFormatter())
        logger.addHandler(fh)

    logger.propagate = False
    return logger
