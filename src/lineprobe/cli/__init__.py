"""Lineprobe CLI layer.

``cli`` and ``main`` are resolved on first attribute access so that
``python -m lineprobe.cli.main`` does not find its own module already
imported (runpy emits a RuntimeWarning in that case).
"""

__all__ = ["cli", "main"]


def __getattr__(name):  # pragma: no cover - trivial lazy import
    if name == "cli":
        from .main import cli

        return cli
    if name == "main":
        from .main import main

        return main
    raise AttributeError(name)
