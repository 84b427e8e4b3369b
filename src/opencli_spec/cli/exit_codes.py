"""Process exit statuses of ``opencli-inspect``.

Load failures follow BSD ``sysexits.h`` so that shell scripts can tell a
bad document from a missing one without parsing stderr:

=====  ==========================  ===============================
Code   Constant                    Raised for
=====  ==========================  ===============================
0      ``SUCCESS``                 document loaded and emitted
1      ``GENERAL_ERROR``           ``ErrorKind.OTHER`` (bad UTF-8)
2      ``UNEXPECTED_ERROR``        bug, or argparse usage error
65     ``PARSE_ERROR``             ``ErrorKind.PARSE``
66     ``READ_ERROR``              ``ErrorKind.IO``
130    ``KEYBOARD_INTERRUPT``      Ctrl+C
=====  ==========================  ===============================
"""

from __future__ import annotations

from opencli_spec.exceptions import ErrorKind

SUCCESS: int = 0

GENERAL_ERROR: int = 1

UNEXPECTED_ERROR: int = 2
"""Shared with argparse, which exits 2 on a usage error."""

PARSE_ERROR: int = 65
"""``EX_DATAERR``: the text is neither a valid YAML nor JSON document."""

READ_ERROR: int = 66
"""``EX_NOINPUT``: the document could not be opened or read."""

KEYBOARD_INTERRUPT: int = 130

_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.PARSE: PARSE_ERROR,
    ErrorKind.IO: READ_ERROR,
    ErrorKind.OTHER: GENERAL_ERROR,
}


def for_kind(kind: ErrorKind) -> int:
    """Return the exit status reported for a failure of *kind*."""
    return _BY_KIND[kind]
