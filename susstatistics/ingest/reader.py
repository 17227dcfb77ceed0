"""
File acquisition.

Reads questionnaire content from disk under a size ceiling. A file that is
missing, unreadable or too large yields None ("no content to validate"),
never an exception; a UserWarning says why.
"""

from __future__ import annotations

import os
import warnings
from pathlib import Path

from susstatistics.core.constants import MAX_CONTENT_BYTES


def read_content(
    path: str | os.PathLike,
    *,
    max_bytes: int = MAX_CONTENT_BYTES,
    encoding: str = 'utf-8-sig',
) -> str | None:
    """
    Read a questionnaire file as text.

    Args:
        path: File to read
        max_bytes: Size ceiling; larger files are not read
        encoding: Text encoding. The default strips a UTF-8 byte order mark.

    Returns:
        The file content, or None if it is unavailable or too large
    """
    path = Path(path)
    try:
        size = path.stat().st_size
    except OSError as e:
        warnings.warn(f"Cannot access {path}: {e}", UserWarning, stacklevel=2)
        return None

    if size > max_bytes:
        warnings.warn(
            f"{path} is {size} bytes, larger than the {max_bytes} byte limit",
            UserWarning,
            stacklevel=2,
        )
        return None

    try:
        return path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        warnings.warn(f"Cannot read {path}: {e}", UserWarning, stacklevel=2)
        return None
