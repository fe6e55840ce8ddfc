"""Public package surface for lsnewer.

Exports ``main`` and ``main_list`` for programmatic CLI invocation.
Timestamp, threshold, and traversal helpers live in submodules.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import the filtering CLI entrypoint."""
    from .cli import main as _main

    return _main(*args, **kwargs)


def main_list(*args, **kwargs):
    """Lazily import the unfiltered listing CLI entrypoint."""
    from .cli import main_list as _main_list

    return _main_list(*args, **kwargs)


__all__ = ["main", "main_list"]
