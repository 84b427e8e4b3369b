"""YAML and JSON text codecs.

This module is the **only** place in the codebase that imports ``yaml``
and ``json``.  Every decoder exception is caught here and re-raised as a
:class:`~opencli_spec.exceptions.DocumentParseError` — nothing raw
escapes the infrastructure boundary.

The decoders only turn text into plain Python values (dicts, lists,
scalars, and :class:`~opencli_spec.core.codec.PlainScalar` for unquoted
YAML numbers and booleans); turning those values into model records is
the job of :mod:`opencli_spec.core.codec`.
"""

from __future__ import annotations

import json
import re
from collections.abc import Callable
from typing import Any

import yaml

from opencli_spec.core.codec import PlainScalar
from opencli_spec.exceptions import DocumentParseError

_BOOL_TAG: str = "tag:yaml.org,2002:bool"
_INT_TAG: str = "tag:yaml.org,2002:int"
_FLOAT_TAG: str = "tag:yaml.org,2002:float"
_MERGE_TAG: str = "tag:yaml.org,2002:merge"
_REPLACED_TAGS: frozenset[str] = frozenset({
    _BOOL_TAG,
    _INT_TAG,
    _FLOAT_TAG,
    "tag:yaml.org,2002:timestamp",
    "tag:yaml.org,2002:value",
})


class DocumentYamlLoader(yaml.SafeLoader):
    """``SafeLoader`` with YAML 1.2 core-schema scalar resolution.

    * Unquoted dates and times stay strings, so metadata values remain
      JSON-compatible.
    * Only ``true``/``false`` (in any of the three spellings) are
      booleans; ``yes``, ``no``, ``on`` and ``off`` are strings.
    * Integers are decimal, ``0o`` octal or ``0x`` hex.  ``010`` is ten;
      ``1_000`` and ``1:30`` are strings.
    * A bare ``=`` is the string ``"="``.
    * Unquoted numbers and booleans come back as
      :class:`~opencli_spec.core.codec.PlainScalar` so string fields can
      keep the text as written.
    * A mapping that repeats a key is an error.
    """

    yaml_implicit_resolvers = {
        first: [(tag, regexp) for tag, regexp in resolvers if tag not in _REPLACED_TAGS]
        for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
    }

    def construct_mapping(self, node: yaml.Node, deep: bool = False) -> dict[Any, Any]:
        if isinstance(node, yaml.MappingNode):
            seen: set[tuple[str, str]] = set()
            for key_node, _ in node.value:
                if not isinstance(key_node, yaml.ScalarNode) or key_node.tag == _MERGE_TAG:
                    continue
                key = (key_node.tag, key_node.value)
                if key in seen:
                    raise yaml.constructor.ConstructorError(
                        "while constructing a mapping",
                        node.start_mark,
                        f"found duplicate key {key_node.value!r}",
                        key_node.start_mark,
                    )
                seen.add(key)
        return super().construct_mapping(node, deep=deep)


def _construct_core_int(loader: yaml.SafeLoader, node: yaml.ScalarNode) -> int:
    text = loader.construct_scalar(node)
    try:
        if text.lstrip("+-")[:2] in ("0x", "0o"):
            return int(text, 0)
        return int(text, 10)
    except ValueError:
        raise yaml.constructor.ConstructorError(
            None, None, f"invalid integer {text!r}", node.start_mark,
        ) from None


def _keeping_text(construct: Callable[[Any, Any], Any]) -> Callable[[Any, Any], Any]:
    def construct_plain(loader: yaml.SafeLoader, node: yaml.ScalarNode) -> Any:
        value = construct(loader, node)
        if node.style is None:
            return PlainScalar(value=value, text=node.value)
        return value

    return construct_plain


DocumentYamlLoader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)
DocumentYamlLoader.add_implicit_resolver(
    _INT_TAG,
    re.compile(r"^(?:[-+]?[0-9]+|0o[0-7]+|0x[0-9a-fA-F]+)$"),
    list("-+0123456789"),
)
DocumentYamlLoader.add_implicit_resolver(
    _FLOAT_TAG,
    re.compile(
        r"^(?:[-+]?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?)(?:[eE][-+]?[0-9]+)?"
        r"|[-+]?\.(?:inf|Inf|INF)"
        r"|\.(?:nan|NaN|NAN))$"
    ),
    list("-+0123456789."),
)
DocumentYamlLoader.add_constructor(_BOOL_TAG, _keeping_text(yaml.SafeLoader.construct_yaml_bool))
DocumentYamlLoader.add_constructor(_INT_TAG, _keeping_text(_construct_core_int))
DocumentYamlLoader.add_constructor(_FLOAT_TAG, _keeping_text(yaml.SafeLoader.construct_yaml_float))


class DocumentYamlDumper(yaml.SafeDumper):
    """``SafeDumper`` that quotes every string a YAML 1.1 reader or
    :class:`DocumentYamlLoader` would resolve to another type.
    """

    yaml_implicit_resolvers = {
        first: [
            *yaml.SafeDumper.yaml_implicit_resolvers.get(first, []),
            *DocumentYamlLoader.yaml_implicit_resolvers.get(first, []),
        ]
        for first in {
            *yaml.SafeDumper.yaml_implicit_resolvers,
            *DocumentYamlLoader.yaml_implicit_resolvers,
        }
    }


# ---------------------------------------------------------------------------
# YAML
# ---------------------------------------------------------------------------

def decode_yaml(text: str) -> Any:
    """Parse *text* as a single YAML document.

    Unquoted numbers and booleans are returned as
    :class:`~opencli_spec.core.codec.PlainScalar`; see
    :class:`DocumentYamlLoader`.

    Raises
    ------
    DocumentParseError
        When the text is not well-formed YAML.
    """
    try:
        return yaml.load(text, Loader=DocumentYamlLoader)  # noqa: S506
    except yaml.MarkedYAMLError as exc:
        mark = exc.problem_mark
        raise DocumentParseError(
            str(exc),
            line=mark.line + 1 if mark is not None else None,
            column=mark.column + 1 if mark is not None else None,
        ) from exc
    except (yaml.YAMLError, RecursionError) as exc:
        raise DocumentParseError(f"YAML decoding failed: {exc}") from exc


def encode_yaml(data: dict[str, Any]) -> str:
    """Render *data* as block-style YAML, preserving key order."""
    return yaml.dump(
        data,
        Dumper=DocumentYamlDumper,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------

def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name!r}")


def _reject_duplicates(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    mapping: dict[str, Any] = {}
    for key, value in pairs:
        if key in mapping:
            raise ValueError(f"duplicate field `{key}`")
        mapping[key] = value
    return mapping


def decode_json(text: str) -> Any:
    """Parse *text* as strict JSON.

    ``NaN``, ``Infinity`` and ``-Infinity`` are rejected, as is an object
    that repeats a key.

    Raises
    ------
    DocumentParseError
        When the text is not well-formed JSON.
    """
    try:
        return json.loads(
            text,
            parse_constant=_reject_constant,
            object_pairs_hook=_reject_duplicates,
        )
    except json.JSONDecodeError as exc:
        raise DocumentParseError(
            str(exc),
            line=exc.lineno,
            column=exc.colno,
        ) from exc
    except (ValueError, RecursionError) as exc:
        raise DocumentParseError(f"JSON decoding failed: {exc}") from exc


def encode_json(data: dict[str, Any], *, indent: int | None = 2) -> str:
    """Render *data* as JSON text with a trailing newline.

    Raises
    ------
    ValueError
        If *data* holds a NaN or infinite float.
    """
    return json.dumps(data, indent=indent, ensure_ascii=False, allow_nan=False) + "\n"
