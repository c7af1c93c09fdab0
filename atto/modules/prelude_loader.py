from __future__ import annotations
import logging
from pathlib import Path
from typing import Protocol

from atto.config import get_prelude_root

logger = logging.getLogger(__name__)


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str) -> None: ...


def prelude_path() -> Path:
    return get_prelude_root() / 'core.at'


def read_prelude() -> str:
    return prelude_path().read_text(encoding='utf-8')


def load_prelude(itp: _HasEvalPrelude) -> None:
    """Load core.at into the interpreter; raises FileNotFoundError when it is missing."""
    path = prelude_path()
    code = path.read_text(encoding='utf-8')
    logger.debug("loading prelude from %s", path)
    itp.eval_prelude(code)
