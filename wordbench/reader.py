"""
Copyright (c) 2025. All rights reserved.
"""

"""
Input file reading.
"""

import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


def read_text(path: Union[str, Path]) -> str:
    """
    Read a whole file into memory as text.

    Undecodable bytes are replaced with U+FFFD, which is not a letter and so
    acts as a word separator.

    Returns:
        The file contents, or "" if the file cannot be read. The failure is
        logged and the caller carries on with the next file.
    """
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()
    except OSError as e:
        logger.error(f"Error opening file: {path} ({e.strerror or e})")
        return ""
