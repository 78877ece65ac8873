"""The lint-rule table shipped with the project."""

from __future__ import annotations

from typing import Any

from .config import LintConfig, parse_config

DEFAULT_BLOCKS: list[dict[str, Any]] = [
    {
        "files": ["**/*.js"],
        "languageOptions": {"ecmaVersion": "latest"},
        "rules": {
            "no-unused-vars": "warn",
            "no-console": "off",
            "semi": ["error", "always"],
        },
    },
]


def default_config() -> LintConfig:
    """Return a fresh copy of the shipped table."""
    return parse_config(DEFAULT_BLOCKS, source="default")


__all__ = ["DEFAULT_BLOCKS", "default_config"]
