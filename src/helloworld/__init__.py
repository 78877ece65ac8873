"""helloworld package bootstrap.

Exposes the package version used by the API health probe and the CLI.
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.1.0"
