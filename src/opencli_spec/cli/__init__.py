"""CLI layer — the ``opencli-inspect`` sample host program.

This package is the outermost layer of the application.  It may import
from ``core``, ``infra`` and the loader, but no other layer may import
from ``cli``.
"""
