"""File-system access for document sources.

Operating-system errors are mapped to
:class:`~opencli_spec.exceptions.DocumentReadError` here so that callers
only ever see the package's own exception types.
"""

from __future__ import annotations

import os
from pathlib import Path

from opencli_spec.exceptions import DocumentReadError


def read_text(path: str | os.PathLike[str]) -> str:
    """Read the whole file at *path* as UTF-8 text.

    Raises
    ------
    DocumentReadError
        If the file cannot be opened or read, or is not valid UTF-8.
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DocumentReadError(
            f"Document not found: {path}",
            path=path,
            hint="Check the path and try again.",
        ) from exc
    except PermissionError as exc:
        raise DocumentReadError(
            f"Permission denied reading document: {path}",
            path=path,
        ) from exc
    except OSError as exc:
        raise DocumentReadError(
            f"Cannot read document {path}: {exc.strerror or exc}",
            path=path,
        ) from exc
    except UnicodeDecodeError as exc:
        raise DocumentReadError(
            f"Document is not valid UTF-8 text: {path}",
            path=path,
        ) from exc
