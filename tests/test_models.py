"""Tests for domain models (core/models.py).

The records are plain dataclasses — these tests verify default values,
equality semantics, recursion and in-place editing.
"""

from __future__ import annotations

import pytest

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
    Option,
)


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

def _make_document(**overrides: object) -> Document:
    """Factory with sensible defaults for concise tests."""
    defaults: dict[str, object] = {
        "opencli": "0.1",
        "info": Info(title="demo", version="1.0"),
    }
    defaults.update(overrides)
    return Document(**defaults)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

class TestDefaults:
    def test_document_sequences_default_to_empty(self) -> None:
        doc = _make_document()
        assert doc.arguments == []
        assert doc.options == []
        assert doc.commands == []
        assert doc.exit_codes == []
        assert doc.examples == []
        assert doc.metadata == []

    def test_document_optionals_default_to_absent(self) -> None:
        doc = _make_document()
        assert doc.conventions is None
        assert doc.interactive is None

    def test_info_optionals_default_to_absent(self) -> None:
        info = Info(title="demo", version="1.0")
        assert info.summary is None
        assert info.description is None
        assert info.contact is None
        assert info.license is None

    def test_command_defaults(self) -> None:
        cmd = Command(name="build")
        assert cmd.aliases == []
        assert cmd.options == []
        assert cmd.arguments == []
        assert cmd.commands == []
        assert cmd.exit_codes == []
        assert cmd.examples == []
        assert cmd.metadata == []
        assert cmd.description is None
        assert cmd.hidden is None
        assert cmd.interactive is None

    def test_every_conventions_field_is_optional(self) -> None:
        conventions = Conventions()
        assert conventions.group_options is None
        assert conventions.option_argument_separator is None

    def test_contact_and_license_fields_are_optional(self) -> None:
        assert Contact() == Contact(name=None, url=None, email=None)
        assert License() == License(name=None, identifier=None)

    def test_metadata_value_defaults_to_none(self) -> None:
        assert Metadata(name="x").value is None

    def test_sequence_defaults_are_not_shared(self) -> None:
        a = Command(name="a")
        b = Command(name="b")
        a.aliases.append("x")
        assert b.aliases == []

    def test_absent_flag_differs_from_false(self) -> None:
        assert Command(name="a") != Command(name="a", hidden=False)


# ---------------------------------------------------------------------------
# Required fields
# ---------------------------------------------------------------------------

class TestRequiredFields:
    def test_info_requires_title_and_version(self) -> None:
        with pytest.raises(TypeError):
            Info(title="demo")  # type: ignore[call-arg]

    def test_command_requires_name(self) -> None:
        with pytest.raises(TypeError):
            Command()  # type: ignore[call-arg]

    def test_exit_code_requires_code(self) -> None:
        with pytest.raises(TypeError):
            ExitCode(description="ok")  # type: ignore[call-arg]

    def test_fields_are_keyword_only(self) -> None:
        with pytest.raises(TypeError):
            ExitCode(0)  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Equality and editing
# ---------------------------------------------------------------------------

class TestEquality:
    def test_structural_equality(self) -> None:
        a = _make_document(commands=[Command(name="build")])
        b = _make_document(commands=[Command(name="build")])
        assert a == b

    def test_nested_difference_breaks_equality(self) -> None:
        a = _make_document(commands=[Command(name="build", commands=[Command(name="x")])])
        b = _make_document(commands=[Command(name="build", commands=[Command(name="y")])])
        assert a != b

    def test_arity_bounds_are_not_checked(self) -> None:
        arity = Arity(minimum=5, maximum=1)
        assert arity.minimum == 5
        assert arity.maximum == 1

    def test_field_edit_is_plain_assignment(self) -> None:
        doc = _make_document()
        doc.info.title = "renamed"
        doc.commands = [Command(name="run")]
        assert doc.info.title == "renamed"
        assert doc.commands[0].name == "run"

    def test_duplicate_aliases_are_allowed(self) -> None:
        opt = Option(name="--x", aliases=["-x", "-x"])
        assert opt.aliases == ["-x", "-x"]


class TestRecursion:
    def test_deep_command_tree(self) -> None:
        leaf = Command(name="leaf")
        node = leaf
        for depth in range(50):
            node = Command(name=f"level{depth}", commands=[node])
        cursor = node
        for _ in range(50):
            cursor = cursor.commands[0]
        assert cursor == leaf

    def test_option_owns_arguments(self) -> None:
        arg = Argument(name="count", arity=Arity(minimum=1))
        opt = Option(name="--jobs", arguments=[arg])
        assert opt.arguments[0].arity == Arity(minimum=1, maximum=None)
