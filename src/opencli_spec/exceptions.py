"""Custom exception hierarchy for opencli-spec.

Every failure a load entry point can produce is a subclass of
:class:`OpenCliError`.  Raw third-party exceptions (from PyYAML, the
``json`` module or the operating system) must NEVER propagate beyond the
infrastructure layer — they are caught and re-raised as one of the typed
subclasses defined here, with the original chained as ``__cause__``.

Hierarchy
---------
OpenCliError
├── DocumentParseError      (ErrorKind.PARSE)
├── DocumentReadError       (ErrorKind.IO)
└── InvalidEncodingError    (ErrorKind.OTHER)
"""

from __future__ import annotations

import enum
import os


class ErrorKind(enum.Enum):
    """Classification of a load failure."""

    PARSE = "parse"
    """The structured text could not be decoded into a document."""

    IO = "io"
    """The underlying byte source could not be read."""

    OTHER = "other"
    """A fixed, non-decoder failure (currently: input is not text)."""


class OpenCliError(Exception):
    """Base exception for all opencli-spec errors.

    Host programs can catch this single type and inspect :attr:`kind`
    to decide how to report the failure.
    """

    kind: ErrorKind = ErrorKind.OTHER

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Decoding --------------------------------------------------------------

class DocumentParseError(OpenCliError):
    """Raised when text cannot be decoded into a :class:`Document`.

    Covers both syntax errors reported by the text decoder and
    structural errors (missing or wrongly typed fields) reported by the
    model codec.
    """

    kind = ErrorKind.PARSE

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.line: int | None = line
        """1-based line of the failure, when the decoder reports one."""
        self.column: int | None = column
        """1-based column of the failure, when the decoder reports one."""


# --- Reading ---------------------------------------------------------------

class DocumentReadError(OpenCliError):
    """Raised when a document file cannot be opened or read."""

    kind = ErrorKind.IO

    def __init__(
        self,
        message: str,
        *,
        path: str | os.PathLike[str] | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.path = path


# --- Input validation ------------------------------------------------------

class InvalidEncodingError(OpenCliError):
    """Raised when a byte buffer is not well-formed UTF-8 text."""

    kind = ErrorKind.OTHER


def append_fallback_note(hint: str) -> str:
    """Append the YAML-then-JSON reporting note to an existing hint.

    The note is appended only once and preserves the original hint
    content verbatim.
    """
    marker = "YAML is tried first;"
    if marker in hint:
        return hint
    return "\n".join(
        (
            hint,
            marker,
            "    a broken YAML document is reported with the JSON decoder's message.",
        )
    )
