"""Domain models for OpenCLI documents.

Every record is a plain dataclass — a value object with structural
equality and no behaviour beyond data access.  Records own their
children outright: a :class:`Document` owns its commands, a
:class:`Command` owns its sub-commands, arguments and options, and so on
down the tree.  There are no back-references and no shared nodes.

Field conventions
-----------------
* Required fields have no default.
* Optional scalars and nested records default to ``None``, which means
  *absent* — never "false" or "empty".
* Sequence fields default to an empty ``list``.  Whether the serialized
  form omitted the field or spelled it out as empty is not recorded.

Records are mutable so that host programs can edit fields in place;
nothing re-validates the tree after such an edit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

MetadataValue = Union[
    None,
    bool,
    int,
    float,
    str,
    list["MetadataValue"],
    dict[str, "MetadataValue"],
]
"""Open-ended, JSON-compatible extension value."""


# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------

@dataclass(slots=True, kw_only=True)
class Contact:
    """Contact information for the person or organization behind a CLI."""

    name: str | None = None
    """The identifying name of the contact person/organization."""

    url: str | None = None
    """URI for the contact information."""

    email: str | None = None
    """Email address of the contact person/organization."""


@dataclass(slots=True, kw_only=True)
class License:
    """Licensing information for a CLI."""

    name: str | None = None
    """The license name."""

    identifier: str | None = None
    """The SPDX license identifier (e.g. ``MIT``)."""


@dataclass(slots=True, kw_only=True)
class Info:
    """Title, version and descriptive metadata of a CLI."""

    title: str
    """The application title."""

    summary: str | None = None
    """A short summary of the application."""

    description: str | None = None
    """A longer description of the application."""

    contact: Contact | None = None
    license: License | None = None

    version: str
    """The application version."""


@dataclass(slots=True, kw_only=True)
class Conventions:
    """Global parsing conventions followed by the CLI."""

    group_options: bool | None = None
    """Whether grouping of short options (``-abc``) is allowed."""

    option_argument_separator: str | None = None
    """The separator between an option and its argument (e.g. ``=``)."""


# ---------------------------------------------------------------------------
# Leaf records
# ---------------------------------------------------------------------------

@dataclass(slots=True, kw_only=True)
class Arity:
    """Minimum and maximum number of values an argument accepts.

    No relation between the two bounds is enforced.
    """

    minimum: int | None = None
    maximum: int | None = None


@dataclass(slots=True, kw_only=True)
class ExitCode:
    """One documented exit status."""

    code: int
    description: str | None = None


@dataclass(slots=True, kw_only=True)
class Metadata:
    """A named extension entry with an arbitrary structured value."""

    name: str
    value: MetadataValue = None


# ---------------------------------------------------------------------------
# Command tree
# ---------------------------------------------------------------------------

@dataclass(slots=True, kw_only=True)
class Argument:
    """A positional value accepted by a command or an option."""

    name: str
    required: bool | None = None
    arity: Arity | None = None
    accepted_values: list[str] = field(default_factory=list)
    group: str | None = None
    description: str | None = None
    hidden: bool | None = None
    metadata: list[Metadata] = field(default_factory=list)


@dataclass(slots=True, kw_only=True)
class Option:
    """A named option of a command.

    An option may itself take argument values, described by
    :attr:`arguments`.
    """

    name: str
    required: bool | None = None
    aliases: list[str] = field(default_factory=list)
    arguments: list[Argument] = field(default_factory=list)
    group: str | None = None
    description: str | None = None

    recursive: bool | None = None
    """Whether the option is also accepted by every sub-command."""

    hidden: bool | None = None
    metadata: list[Metadata] = field(default_factory=list)


@dataclass(slots=True, kw_only=True)
class Command:
    """One node of the command tree: the root CLI or any sub-command."""

    name: str
    aliases: list[str] = field(default_factory=list)
    options: list[Option] = field(default_factory=list)
    arguments: list[Argument] = field(default_factory=list)
    commands: list[Command] = field(default_factory=list)
    exit_codes: list[ExitCode] = field(default_factory=list)
    description: str | None = None
    hidden: bool | None = None
    examples: list[str] = field(default_factory=list)

    interactive: bool | None = None
    """Whether the command requires interactive input."""

    metadata: list[Metadata] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------

@dataclass(slots=True, kw_only=True)
class Document:
    """Root of one OpenCLI description.

    The root carries the arguments, options, sub-commands and exit codes
    of the CLI's top-level command directly.
    """

    opencli: str
    """The OpenCLI specification version the document follows."""

    info: Info
    conventions: Conventions | None = None
    arguments: list[Argument] = field(default_factory=list)
    options: list[Option] = field(default_factory=list)
    commands: list[Command] = field(default_factory=list)
    exit_codes: list[ExitCode] = field(default_factory=list)
    examples: list[str] = field(default_factory=list)
    interactive: bool | None = None
    metadata: list[Metadata] = field(default_factory=list)
