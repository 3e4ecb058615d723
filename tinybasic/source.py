"""Source loading.

Reads a script from disk and enforces the size limits the translator
expects: the file must exist, must not be empty and must not exceed
:data:`MAX_SOURCE_BYTES`.


File: source.py
Version: 0.1.0
License: MIT
"""

from pathlib import Path

from tinybasic.exceptions import SourceError


MAX_SOURCE_BYTES = 3 * 1024 * 1024


def load_source(path: str) -> str:
    """
    Read a source file as UTF-8 text.

    Parameters:
        path (str): The file to read.

    Returns:
        str: The file contents.

    Raises:
        SourceError: If the file is missing, empty, too large or not UTF-8.
    """
    file = Path(path)
    try:
        size = file.stat().st_size
    except OSError as e:
        raise SourceError(f"Failed to get input file size: {e.strerror}", file=path) from e
    if size > MAX_SOURCE_BYTES:
        raise SourceError(f"Input file too large (> {MAX_SOURCE_BYTES // (1024 * 1024)} MB)", file=path)
    if size == 0:
        raise SourceError("Input file empty", file=path)
    try:
        return file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceError(f"Failed to read input file: {e}", file=path) from e
