"""Lint-rule table: override blocks, severities and per-file resolution."""

from __future__ import annotations

from .config import (
    ConfigBlock,
    LanguageOptions,
    LintConfig,
    LintConfigError,
    ResolvedConfig,
    RuleSetting,
    Severity,
    glob_match,
    load_config,
    parse_config,
)
from .defaults import DEFAULT_BLOCKS, default_config

__all__ = [
    "DEFAULT_BLOCKS",
    "ConfigBlock",
    "LanguageOptions",
    "LintConfig",
    "LintConfigError",
    "ResolvedConfig",
    "RuleSetting",
    "Severity",
    "default_config",
    "glob_match",
    "load_config",
    "parse_config",
]
