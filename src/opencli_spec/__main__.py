"""``python -m opencli_spec [SOURCE] [options]``, the same as ``opencli-inspect``."""

from __future__ import annotations

from opencli_spec.cli.app import cli

if __name__ == "__main__":
    cli()
