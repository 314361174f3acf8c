from __future__ import annotations
import logging
import os
import sys
from pathlib import Path
from typing import Optional


# Resolve installation dir (scopeval package directory)
_SCOPEVAL_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_FILE = _SCOPEVAL_DIR / 'prelude' / 'core.clj'
_DEFAULT_LOG_LEVEL = 'WARNING'

# Values of SCOPEVAL_PRELUDE_PATH that switch the prelude off
_DISABLED = {'none', 'off', '0'}


def get_prelude_path() -> Optional[Path]:
    """Return the prelude file to load into the core environment, or None.

    SCOPEVAL_PRELUDE_PATH may name a file or a directory; a directory is
    expected to hold `core.clj`.
    """
    raw = os.environ.get('SCOPEVAL_PRELUDE_PATH')
    if raw is None or not raw.strip():
        return _DEFAULT_PRELUDE_FILE
    if raw.strip().lower() in _DISABLED:
        return None
    p = Path(raw.strip())
    return p / 'core.clj' if p.is_dir() else p


def get_log_level() -> str:
    return os.environ.get('SCOPEVAL_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Configure basic logging for applications embedding scopeval.

    Library code only ever emits through module loggers; this is opt-in.
    """
    level = (level or get_log_level()).upper()
    numeric_level = getattr(logging, level, logging.WARNING)

    config = {
        'level': numeric_level,
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    }
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        config['filename'] = log_file
    else:
        config['stream'] = sys.stderr

    logging.basicConfig(**config)
    logging.getLogger(__name__).info("Logging initialized at %s level", level)
