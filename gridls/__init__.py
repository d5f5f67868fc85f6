"""gridls: ls-style directory listings in balanced columns or long format.

``main`` runs the command line programmatically; the listing pipeline lives
in ``gridls.listing`` and the filesystem walk in ``gridls.entry_model``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Run the gridls command line and return its exit status."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = ["main"]
