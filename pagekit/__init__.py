"""Component and asset-page loaders for a static-site pipeline.

This package discovers reusable components by walking a source tree, dispatches
each file to a format's parser and render engines, and loads asset-producing
source files (stylesheets, scripts, data files) as page records. The ``pagekit``
console script exposes the loaders for inspection.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from pagekit import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
