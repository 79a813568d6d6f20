"""mdstatic static site generator.

This package turns a directory of Markdown documents into a themed HTML site.
The site can either be built into an output directory or previewed through a
small HTTP server that renders every page on request.

The main entry point is the CLI module, which dispatches ``resource:action``
command tokens such as ``generate:site`` or ``preview:run``.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
