"""Conversion between model records and plain structured values.

The serialized form of every record is a mapping keyed by the
lower-camel-case spelling of each field name (``exit_codes`` ↔
``exitCodes``).  Decoding is strict about types and lenient about
absence; encoding is compact.

Decoding rules
--------------
* A required field that is absent or of the wrong type is an error.
* An optional field that is absent or ``null`` decodes to ``None``.
* A sequence field that is absent, ``null`` or empty decodes to ``[]``.
* Unknown keys are ignored.
* No coercion: ``"1"`` is not an integer, ``1.0`` is not a string,
  ``0`` is not a boolean.
* The one exception is :class:`PlainScalar`, which a YAML decoder emits
  for unquoted numbers and booleans.  A string field takes its source
  text (``opencli: 0.1`` is ``"0.1"``); every other field takes the
  resolved value.
* Metadata floats must be finite.

Encoding rules
--------------
* ``None`` fields and empty sequence fields are omitted.
* Metadata values are emitted as-is, including empty containers.

Guarantees
----------
* Pure — no I/O, no logging.
* Only :class:`~opencli_spec.exceptions.DocumentParseError` escapes.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass, fields, is_dataclass
from typing import Any, TypeVar

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
from opencli_spec.exceptions import DocumentParseError

T = TypeVar("T")

_INT32_MIN: int = -(2**31)
_INT32_MAX: int = 2**31 - 1


# ---------------------------------------------------------------------------
# Source-text scalars
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PlainScalar:
    """An unquoted YAML scalar that resolved to a non-string value."""

    value: bool | int | float
    """The resolved value (``0.1``, ``2024``, ``True``)."""

    text: str
    """The scalar exactly as written (``"0.1"``, ``"2024"``, ``"true"``)."""


def plain_value(value: Any) -> Any:
    """Return *value* with every :class:`PlainScalar` replaced by its resolved value."""
    if isinstance(value, PlainScalar):
        return value.value
    if isinstance(value, list):
        return [plain_value(item) for item in value]
    if isinstance(value, dict):
        return {plain_value(key): plain_value(item) for key, item in value.items()}
    return value


# ---------------------------------------------------------------------------
# Field naming
# ---------------------------------------------------------------------------

def wire_name(field_name: str) -> str:
    """Return the lower-camel-case wire spelling of *field_name*."""
    head, *rest = field_name.split("_")
    return head + "".join(part.capitalize() for part in rest)


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------

def to_dict(record: Any) -> dict[str, Any]:
    """Render a model record as a compact, wire-named ``dict``."""
    rendered: dict[str, Any] = {}
    for spec in fields(record):
        value = getattr(record, spec.name)
        if value is None:
            continue
        if spec.default_factory is list and not value:
            continue
        rendered[wire_name(spec.name)] = _encode(value)
    return rendered


def _encode(value: Any) -> Any:
    if is_dataclass(value):
        return to_dict(value)
    if isinstance(value, list):
        return [_encode(item) for item in value]
    if isinstance(value, dict):
        return {key: _encode(item) for key, item in value.items()}
    return value


# ---------------------------------------------------------------------------
# Decoding helpers
# ---------------------------------------------------------------------------

def _describe(value: object) -> str:
    """Describe *value* the way decoder diagnostics refer to it."""
    if isinstance(value, PlainScalar):
        value = value.value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return f"boolean `{str(value).lower()}`"
    if isinstance(value, int):
        return f"integer `{value}`"
    if isinstance(value, float):
        return f"floating point `{value}`"
    if isinstance(value, str):
        return f"string {value!r}"
    if isinstance(value, list):
        return "sequence"
    if isinstance(value, dict):
        return "map"
    return f"value of type {type(value).__name__}"


def _located(path: str, message: str) -> DocumentParseError:
    return DocumentParseError(f"{path}: {message}" if path else message)


class _Fields:
    """Typed accessors over one serialized record.

    *path* is the dotted location of the record inside the document and
    prefixes every error message.
    """

    def __init__(self, data: object, path: str) -> None:
        if not isinstance(data, dict):
            raise _located(path, f"invalid type: {_describe(data)}, expected a map")
        self._data: dict[Any, Any] = data
        self._path = path

    def where(self, key: str) -> str:
        return f"{self._path}.{key}" if self._path else key

    def _invalid(self, key: str, value: object, expected: str) -> DocumentParseError:
        return _located(
            self.where(key), f"invalid type: {_describe(value)}, expected {expected}",
        )

    def _required(self, key: str) -> Any:
        if key not in self._data:
            raise _located(self._path, f"missing field `{key}`")
        return self._data[key]

    # -- scalars ---------------------------------------------------------

    def _str(self, key: str, value: object) -> str:
        if isinstance(value, PlainScalar):
            return value.text
        if not isinstance(value, str):
            raise self._invalid(key, value, "a string")
        return value

    def _int(self, key: str, value: object) -> int:
        value = plain_value(value)
        if isinstance(value, bool) or not isinstance(value, int):
            raise self._invalid(key, value, "a 32-bit integer")
        if not _INT32_MIN <= value <= _INT32_MAX:
            raise _located(
                self.where(key),
                f"invalid value: integer `{value}`, expected a 32-bit integer",
            )
        return value

    def required_str(self, key: str) -> str:
        return self._str(key, self._required(key))

    def optional_str(self, key: str) -> str | None:
        value = self._data.get(key)
        return None if value is None else self._str(key, value)

    def optional_bool(self, key: str) -> bool | None:
        value = plain_value(self._data.get(key))
        if value is None:
            return None
        if not isinstance(value, bool):
            raise self._invalid(key, value, "a boolean")
        return value

    def required_int(self, key: str) -> int:
        return self._int(key, self._required(key))

    def optional_int(self, key: str) -> int | None:
        value = self._data.get(key)
        return None if value is None else self._int(key, value)

    def value(self, key: str) -> MetadataValue:
        value = plain_value(self._data.get(key))
        _check_value(value, self.where(key))
        return value

    # -- nested records --------------------------------------------------

    def required_record(self, key: str, decode: Callable[[object, str], T]) -> T:
        return decode(self._required(key), self.where(key))

    def optional_record(
        self, key: str, decode: Callable[[object, str], T],
    ) -> T | None:
        value = self._data.get(key)
        return None if value is None else decode(value, self.where(key))

    # -- sequences -------------------------------------------------------

    def _sequence(self, key: str) -> list[Any]:
        value = self._data.get(key)
        if value is None:
            return []
        if not isinstance(value, list):
            raise self._invalid(key, value, "a sequence")
        return value

    def strings(self, key: str) -> list[str]:
        items = self._sequence(key)
        return [self._str(f"{key}[{index}]", item) for index, item in enumerate(items)]

    def records(self, key: str, decode: Callable[[object, str], T]) -> list[T]:
        items = self._sequence(key)
        return [
            decode(item, f"{self.where(key)}[{index}]")
            for index, item in enumerate(items)
        ]


def _check_value(value: object, path: str) -> None:
    """Ensure *value* is a JSON-compatible metadata value."""
    if isinstance(value, float) and not math.isfinite(value):
        raise _located(path, f"invalid value: {_describe(value)}, expected a finite number")
    if value is None or isinstance(value, (bool, int, float, str)):
        return
    if isinstance(value, list):
        for index, item in enumerate(value):
            _check_value(item, f"{path}[{index}]")
        return
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise _located(path, f"invalid map key: {_describe(key)}, expected a string")
            _check_value(item, f"{path}.{key}")
        return
    raise _located(path, f"invalid type: {_describe(value)}, expected a JSON-compatible value")


# ---------------------------------------------------------------------------
# Per-record decoders
# ---------------------------------------------------------------------------

def _decode_contact(data: object, path: str) -> Contact:
    f = _Fields(data, path)
    return Contact(
        name=f.optional_str("name"),
        url=f.optional_str("url"),
        email=f.optional_str("email"),
    )


def _decode_license(data: object, path: str) -> License:
    f = _Fields(data, path)
    return License(
        name=f.optional_str("name"),
        identifier=f.optional_str("identifier"),
    )


def _decode_info(data: object, path: str) -> Info:
    f = _Fields(data, path)
    return Info(
        title=f.required_str("title"),
        summary=f.optional_str("summary"),
        description=f.optional_str("description"),
        contact=f.optional_record("contact", _decode_contact),
        license=f.optional_record("license", _decode_license),
        version=f.required_str("version"),
    )


def _decode_conventions(data: object, path: str) -> Conventions:
    f = _Fields(data, path)
    return Conventions(
        group_options=f.optional_bool("groupOptions"),
        option_argument_separator=f.optional_str("optionArgumentSeparator"),
    )


def _decode_arity(data: object, path: str) -> Arity:
    f = _Fields(data, path)
    return Arity(minimum=f.optional_int("minimum"), maximum=f.optional_int("maximum"))


def _decode_exit_code(data: object, path: str) -> ExitCode:
    f = _Fields(data, path)
    return ExitCode(code=f.required_int("code"), description=f.optional_str("description"))


def _decode_metadata(data: object, path: str) -> Metadata:
    f = _Fields(data, path)
    return Metadata(name=f.required_str("name"), value=f.value("value"))


def _decode_argument(data: object, path: str) -> Argument:
    f = _Fields(data, path)
    return Argument(
        name=f.required_str("name"),
        required=f.optional_bool("required"),
        arity=f.optional_record("arity", _decode_arity),
        accepted_values=f.strings("acceptedValues"),
        group=f.optional_str("group"),
        description=f.optional_str("description"),
        hidden=f.optional_bool("hidden"),
        metadata=f.records("metadata", _decode_metadata),
    )


def _decode_option(data: object, path: str) -> Option:
    f = _Fields(data, path)
    return Option(
        name=f.required_str("name"),
        required=f.optional_bool("required"),
        aliases=f.strings("aliases"),
        arguments=f.records("arguments", _decode_argument),
        group=f.optional_str("group"),
        description=f.optional_str("description"),
        recursive=f.optional_bool("recursive"),
        hidden=f.optional_bool("hidden"),
        metadata=f.records("metadata", _decode_metadata),
    )


def _decode_command(data: object, path: str) -> Command:
    f = _Fields(data, path)
    return Command(
        name=f.required_str("name"),
        aliases=f.strings("aliases"),
        options=f.records("options", _decode_option),
        arguments=f.records("arguments", _decode_argument),
        commands=f.records("commands", _decode_command),
        exit_codes=f.records("exitCodes", _decode_exit_code),
        description=f.optional_str("description"),
        hidden=f.optional_bool("hidden"),
        examples=f.strings("examples"),
        interactive=f.optional_bool("interactive"),
        metadata=f.records("metadata", _decode_metadata),
    )


def _decode_document(data: object, path: str) -> Document:
    f = _Fields(data, path)
    return Document(
        opencli=f.required_str("opencli"),
        info=f.required_record("info", _decode_info),
        conventions=f.optional_record("conventions", _decode_conventions),
        arguments=f.records("arguments", _decode_argument),
        options=f.records("options", _decode_option),
        commands=f.records("commands", _decode_command),
        exit_codes=f.records("exitCodes", _decode_exit_code),
        examples=f.strings("examples"),
        interactive=f.optional_bool("interactive"),
        metadata=f.records("metadata", _decode_metadata),
    )


_DECODERS: dict[type, Callable[[object, str], Any]] = {
    Argument: _decode_argument,
    Arity: _decode_arity,
    Command: _decode_command,
    Contact: _decode_contact,
    Conventions: _decode_conventions,
    Document: _decode_document,
    ExitCode: _decode_exit_code,
    Info: _decode_info,
    License: _decode_license,
    Metadata: _decode_metadata,
    Option: _decode_option,
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def from_dict(record_type: type[T], data: object) -> T:
    """Decode *data* into an instance of the model class *record_type*.

    Raises
    ------
    DocumentParseError
        If a required field is missing or any field has the wrong type.
    """
    try:
        decode = _DECODERS[record_type]
    except KeyError:
        raise TypeError(f"{record_type!r} is not an OpenCLI model record") from None
    return decode(data, "")


def document_from_dict(data: object) -> Document:
    """Decode a whole :class:`Document` from a parsed structured value."""
    return _decode_document(data, "")
