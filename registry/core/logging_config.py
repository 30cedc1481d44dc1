"""Root logger set-up for the server."""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> bool:
  """
  Send log records to stderr and, when `logfile` is given, to that file.

  Returns False without touching anything if the root logger already has
  handlers (pytest, uvicorn or an earlier call), True otherwise. Unknown
  level names fall back to INFO.
  """
  root = logging.getLogger()
  if root.handlers:
    return False

  root.setLevel(getattr(logging, level.upper(), logging.INFO))
  formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

  handlers: list = [logging.StreamHandler()]
  if logfile:
    handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))

  for handler in handlers:
    handler.setFormatter(formatter)
    root.addHandler(handler)

  return True
