"""Core layer — the document model and its dict codec.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from opencli_spec.core.codec import (
    PlainScalar,
    document_from_dict,
    from_dict,
    plain_value,
    to_dict,
    wire_name,
)
from opencli_spec.core.models import (
    Argument,
    Arity,
    Command,
    Contact,
    Conventions,
    Document,
    ExitCode,
    Info,
    License,
    Metadata,
    MetadataValue,
    Option,
)

__all__: list[str] = [
    "Argument",
    "Arity",
    "Command",
    "Contact",
    "Conventions",
    "Document",
    "ExitCode",
    "Info",
    "License",
    "Metadata",
    "MetadataValue",
    "Option",
    "PlainScalar",
    "document_from_dict",
    "from_dict",
    "plain_value",
    "to_dict",
    "wire_name",
]
