from __future__ import annotations
import os
from pathlib import Path

_ATTO_DIR = Path(__file__).resolve().parent

_DEFAULT_PRELUDE_DIR = _ATTO_DIR / 'prelude'
_DEFAULT_LOG_LEVEL = 'WARNING'


def get_prelude_root() -> Path:
    """Directory holding core.at. ATTO_PRELUDE_PATH may name it, or core.at itself."""
    raw = os.environ.get('ATTO_PRELUDE_PATH', '').strip()
    if not raw:
        return _DEFAULT_PRELUDE_DIR
    p = Path(raw)
    return p.parent if p.is_file() else p


def get_log_level() -> str:
    return os.environ.get('ATTO_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()
