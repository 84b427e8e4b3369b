"""Render a loaded :class:`~opencli_spec.core.models.Document` as a tree.

The document is first flattened into a neutral :class:`_Node` outline,
then drawn either with a Rich :class:`~rich.tree.Tree` or, when Rich is
not installed, as a plain indented listing on stdout.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

from opencli_spec.cli.console import get_rich_console
from opencli_spec.core.models import Argument, Arity, Command, Document, ExitCode, Option


@dataclass(slots=True)
class _Node:
    label: str
    style: str = ""
    children: list[_Node] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Outline builders
# ---------------------------------------------------------------------------

def _with_description(text: str, description: str | None) -> str:
    return f"{text}: {description}" if description else text


def _hidden_suffix(hidden: bool | None) -> str:
    return " (hidden)" if hidden else ""


def _arity_text(arity: Arity | None) -> str:
    if arity is None:
        return ""
    low = "" if arity.minimum is None else str(arity.minimum)
    high = "" if arity.maximum is None else str(arity.maximum)
    return f" [{low}..{high}]"


def _argument_node(argument: Argument) -> _Node:
    label = f"<{argument.name}>{_arity_text(argument.arity)}"
    if argument.required:
        label += " (required)"
    label += _hidden_suffix(argument.hidden)
    node = _Node(_with_description(label, argument.description), style="green")
    if argument.accepted_values:
        node.children.append(
            _Node("one of: " + ", ".join(argument.accepted_values), style="dim"),
        )
    return node


def _option_node(option: Option, show_hidden: bool) -> _Node:
    names = ", ".join([option.name, *option.aliases])
    label = names
    if option.required:
        label += " (required)"
    if option.recursive:
        label += " (recursive)"
    label += _hidden_suffix(option.hidden)
    node = _Node(_with_description(label, option.description), style="cyan")
    node.children.extend(
        _argument_node(argument)
        for argument in option.arguments
        if show_hidden or not argument.hidden
    )
    return node


def _exit_code_node(exit_code: ExitCode) -> _Node:
    return _Node(
        _with_description(f"exit {exit_code.code}", exit_code.description),
        style="yellow",
    )


def _members(node: Command | Document, show_hidden: bool) -> list[_Node]:
    """Outline the options, arguments, exit codes and sub-commands of *node*."""
    children: list[_Node] = []
    children.extend(
        _argument_node(a) for a in node.arguments if show_hidden or not a.hidden
    )
    children.extend(
        _option_node(o, show_hidden) for o in node.options if show_hidden or not o.hidden
    )
    children.extend(_exit_code_node(code) for code in node.exit_codes)
    children.extend(
        _command_node(c, show_hidden) for c in node.commands if show_hidden or not c.hidden
    )
    return children


def _command_node(command: Command, show_hidden: bool) -> _Node:
    label = command.name
    if command.aliases:
        label += f" ({', '.join(command.aliases)})"
    label += _hidden_suffix(command.hidden)
    return _Node(
        _with_description(label, command.description),
        style="bold",
        children=_members(command, show_hidden),
    )


def build_outline(document: Document, *, show_hidden: bool = False) -> _Node:
    """Return the renderable outline of *document*."""
    info = document.info
    root = _Node(
        _with_description(f"{info.title} {info.version}", info.summary),
        style="bold magenta",
    )
    root.children.append(_Node(f"OpenCLI {document.opencli}", style="dim"))
    root.children.extend(_members(document, show_hidden))
    return root


# ---------------------------------------------------------------------------
# Renderers
# ---------------------------------------------------------------------------

def _plain_lines(node: _Node, depth: int = 0) -> list[str]:
    lines = ["  " * depth + node.label]
    for child in node.children:
        lines.extend(_plain_lines(child, depth + 1))
    return lines


def _rich_tree(node: _Node, parent: object | None = None) -> object:
    from rich.text import Text
    from rich.tree import Tree

    label = Text(node.label, style=node.style)
    branch = Tree(label) if parent is None else parent.add(label)  # type: ignore[attr-defined]
    for child in node.children:
        _rich_tree(child, branch)
    return branch


def render_document(document: Document, *, show_hidden: bool = False) -> None:
    """Draw *document* on stdout, with Rich when it is installed."""
    outline = build_outline(document, show_hidden=show_hidden)
    rich_console = get_rich_console()
    if rich_console is None:
        sys.stdout.write("\n".join(_plain_lines(outline)) + "\n")
        return
    rich_console.print(_rich_tree(outline))
