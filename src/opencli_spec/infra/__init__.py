"""Infrastructure layer — text decoders and file-system access.

This layer wraps PyYAML, the ``json`` module and the operating system.
Every raw third-party exception must be caught here and re-raised as an
:class:`~opencli_spec.exceptions.OpenCliError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from opencli_spec.infra.formats import decode_json, decode_yaml, encode_json, encode_yaml
from opencli_spec.infra.reader import read_text

__all__: list[str] = [
    "decode_json",
    "decode_yaml",
    "encode_json",
    "encode_yaml",
    "read_text",
]
