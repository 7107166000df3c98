"""Public package surface for consoletools.

Exports ``main`` for programmatic CLI invocation.
The reusable helpers live in submodules: ``files``, ``navigator``,
``console``, ``render``, ``randomgen`` and ``timer``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
