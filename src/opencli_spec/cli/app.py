"""CLI application entry point for ``opencli-inspect``.

``opencli-inspect`` is a small host program around the loader: it loads
one OpenCLI document and either draws its command tree or re-emits it
in canonical JSON or YAML form.

This module is the **sole error boundary** of the package.  It catches
:class:`~opencli_spec.exceptions.OpenCliError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages and
returning well-defined exit codes.  The library layers below never
print and never log.
"""

from __future__ import annotations

import argparse
import logging
import sys

from opencli_spec.cli import exit_codes
from opencli_spec.cli.console import console
from opencli_spec.core.models import Document
from opencli_spec.exceptions import OpenCliError
from opencli_spec.version import __version__

logger = logging.getLogger(__name__)

STDIN_SOURCE: str = "-"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="opencli-inspect",
        description="Load an OpenCLI document (YAML or JSON) and inspect it.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "source",
        nargs="?",
        default=None,
        help="Path to the document, or '-' to read it from stdin.",
    )
    parser.add_argument(
        "-o",
        "--output",
        choices=("tree", "json", "yaml"),
        default="tree",
        help="How to print the loaded document (default: tree).",
    )
    parser.add_argument(
        "--show-hidden",
        action="store_true",
        help="Include hidden commands, options and arguments in the tree.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    """Send debug records to stderr when ``--verbose`` is given."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _load(source: str) -> Document:
    """Load the document named by *source* through the matching entry point."""
    from opencli_spec.loader import load_from_bytes, load_from_path

    if source == STDIN_SOURCE:
        logger.debug("Reading OpenCLI document from stdin")
        return load_from_bytes(sys.stdin.buffer.read())
    logger.debug("Reading OpenCLI document from %s", source)
    return load_from_path(source)


def _emit(document: Document, output: str, *, show_hidden: bool) -> None:
    from opencli_spec.loader import dump_json, dump_yaml

    if output == "json":
        sys.stdout.write(dump_json(document))
    elif output == "yaml":
        sys.stdout.write(dump_yaml(document))
    else:
        from opencli_spec.cli.tree_view import render_document

        render_document(document, show_hidden=show_hidden)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the opencli-inspect CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.source is None:
        parser.print_help()
        return exit_codes.SUCCESS

    _configure_logging(args.verbose)

    document = _load(args.source)
    logger.debug(
        "Loaded %r: %d top-level command(s)",
        document.info.title,
        len(document.commands),
    )
    _emit(document, args.output, show_hidden=args.show_hidden)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Run :func:`main` and turn its outcome into a process exit status.

    Load failures print ``Error (<kind>)`` with any hint and exit with the
    status :func:`exit_codes.for_kind` assigns to that kind.  Anything
    else is reported as a bug.
    """
    try:
        sys.exit(main())
    except OpenCliError as exc:
        logger.debug("load failed", exc_info=exc)
        console.print(f"[bold red]Error ({exc.kind.value}):[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.for_kind(exc.kind))
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            f"[bold red]Internal error in opencli-inspect {__version__}.[/bold red]\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
