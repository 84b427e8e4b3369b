"""Load OpenCLI documents from paths, bytes or text.

All three entry points converge on :func:`load_from_text`, which tries
YAML first and falls back to JSON::

    Start → YAML ─ok──────────────→ Document
              └─fail→ JSON ─ok────→ Document
                          └─fail──→ DocumentParseError (JSON's message)

The YAML failure is discarded without a trace.  Decoding is
all-or-nothing per attempt: a caller receives a complete document or an
exception, never a partial tree.

Everything here is stateless and safe to call from several threads at
once.
"""

from __future__ import annotations

import os

from opencli_spec.core.codec import document_from_dict, to_dict
from opencli_spec.core.models import Document
from opencli_spec.exceptions import (
    DocumentParseError,
    InvalidEncodingError,
    append_fallback_note,
)
from opencli_spec.infra.formats import decode_json, decode_yaml, encode_json, encode_yaml
from opencli_spec.infra.reader import read_text


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

def load_from_path(path: str | os.PathLike[str]) -> Document:
    """Load a document from the file at *path*.

    Raises
    ------
    DocumentReadError
        If the file cannot be read or is not UTF-8 text.
    DocumentParseError
        If the contents are neither a valid YAML nor a valid JSON document.
    """
    return load_from_text(read_text(path))


def load_from_bytes(content: bytes | bytearray | memoryview) -> Document:
    """Load a document from a raw byte buffer.

    The buffer must be well-formed UTF-8; no other encoding is guessed.

    Raises
    ------
    InvalidEncodingError
        If *content* is not valid UTF-8.
    DocumentParseError
        If the text is neither a valid YAML nor a valid JSON document.
    """
    try:
        text = bytes(content).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidEncodingError(
            "Input bytes are not valid UTF-8 text.",
            hint="Re-encode the document as UTF-8.",
        ) from exc
    return load_from_text(text)


def load_from_text(text: str) -> Document:
    """Decode *text* as a YAML document, falling back to JSON.

    Raises
    ------
    DocumentParseError
        Carrying the JSON decoder's diagnostic when both attempts fail.
    """
    try:
        return document_from_dict(decode_yaml(text))
    except DocumentParseError:
        pass

    try:
        return document_from_dict(decode_json(text))
    except DocumentParseError as exc:
        exc.hint = append_fallback_note(
            exc.hint or "The document must be a YAML or JSON OpenCLI description.",
        )
        raise


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------

def dump_json(document: Document, *, indent: int | None = 2) -> str:
    """Serialize *document* to JSON text using wire field names.

    Raises ``ValueError`` if a metadata value holds a NaN or infinite float.
    """
    return encode_json(to_dict(document), indent=indent)


def dump_yaml(document: Document) -> str:
    """Serialize *document* to YAML text using wire field names."""
    return encode_yaml(to_dict(document))
