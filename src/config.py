from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    log_file: Optional[Path] = None
    color: bool = True

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Read settings from the environment:
          TODOLIST_LOG_LEVEL  one of DEBUG/INFO/WARNING/ERROR/CRITICAL
          TODOLIST_LOG_FILE   log to this file instead of stderr
          NO_COLOR            disable colored output

        Unknown log levels fall back to WARNING.
        """
        env = os.environ if env is None else env
        level = env.get("TODOLIST_LOG_LEVEL", "WARNING").strip().upper()
        if level not in LOG_LEVELS:
            level = "WARNING"
        log_file = env.get("TODOLIST_LOG_FILE")
        return cls(
            log_level=level,
            log_file=Path(log_file).expanduser().resolve() if log_file else None,
            color=env.get("NO_COLOR") is None,
        )
