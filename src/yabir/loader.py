from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from .errors import make_load_error

logger = logging.getLogger(__name__)


def load_prog(path: Union[str, Path], *, encoding: str = "utf-8") -> str:
    """Read the program at path into a string."""
    p = Path(path)
    try:
        source = p.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
        raise make_load_error(path=str(path), reason=reason) from e
    logger.debug("loaded %d characters from %s", len(source), p)
    return source
