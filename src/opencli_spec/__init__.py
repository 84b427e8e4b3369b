"""opencli-spec — data model and loader for OpenCLI documents.

An OpenCLI document describes a command-line interface: its identity,
commands, arguments, options, exit codes and metadata.  Documents are
loaded from YAML or JSON into plain dataclasses::

    from opencli_spec import load_from_path

    document = load_from_path("path/to/opencli.yaml")
    print(document.info.title)
"""

from opencli_spec.core.codec import document_from_dict, from_dict, to_dict
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
from opencli_spec.exceptions import (
    DocumentParseError,
    DocumentReadError,
    ErrorKind,
    InvalidEncodingError,
    OpenCliError,
)
from opencli_spec.loader import (
    dump_json,
    dump_yaml,
    load_from_bytes,
    load_from_path,
    load_from_text,
)
from opencli_spec.version import __version__

__all__: list[str] = [
    "Argument",
    "Arity",
    "Command",
    "Contact",
    "Conventions",
    "Document",
    "DocumentParseError",
    "DocumentReadError",
    "ErrorKind",
    "ExitCode",
    "Info",
    "InvalidEncodingError",
    "License",
    "Metadata",
    "MetadataValue",
    "OpenCliError",
    "Option",
    "__version__",
    "document_from_dict",
    "dump_json",
    "dump_yaml",
    "from_dict",
    "load_from_bytes",
    "load_from_path",
    "load_from_text",
    "to_dict",
]
