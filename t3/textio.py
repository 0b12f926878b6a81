"""Text file reads and writes shared by the scan and substitution passes.

Files are decoded as UTF-8 with surrogateescape so bytes that are not valid
UTF-8 are written back exactly as read. Line endings are left untouched.
"""

from pathlib import Path

from t3.exceptions import ReadError, WriteError


ENCODING = 'utf-8'
ERRORS = 'surrogateescape'


def read_text(path: Path) -> str:
    """Read a file's full text, raising ReadError on failure."""
    try:
        with open(path, 'r', encoding=ENCODING, errors=ERRORS, newline='') as f:
            return f.read()
    except OSError as e:
        raise ReadError(f"Failed to read {path}: {e}", path) from e


def write_text(path: Path, text: str) -> None:
    """Overwrite a file in place, raising WriteError on failure."""
    try:
        with open(path, 'w', encoding=ENCODING, errors=ERRORS, newline='') as f:
            f.write(text)
    except OSError as e:
        raise WriteError(f"Failed to write {path}: {e}", path) from e
