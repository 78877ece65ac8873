"""Typed model of a flat lint-rule table.

A table is an ordered list of override blocks. Each block carries:
- `files`: glob patterns selecting the source files it applies to,
- `ignores`: glob patterns excluding files from the block,
- `languageOptions`: language level settings (`ecmaVersion`, `sourceType`),
- `rules`: a mapping from rule name to severity, optionally with parameters.

Rule entries use the same shapes a linting tool reads from its config file:

    "warn"                # severity only
    2                     # numeric alias for "error"
    ["error", "always"]   # severity followed by rule-specific options

Resolution
----------
`LintConfig.resolve(path)` merges every block matching `path` in order.
Later blocks override earlier ones per rule and per language option. A
severity-only entry in a later block keeps the options set earlier.

A file is linted only when at least one block with explicit `files`
patterns matches it; blocks without `files` refine whatever is already
selected. A block containing nothing but `ignores` acts as a global ignore.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path, PurePath
from typing import Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_serializer,
    model_validator,
)

Severity = Literal["off", "warn", "error"]
SourceType = Literal["module", "script", "commonjs"]

_SEVERITY_ALIASES: dict[int, Severity] = {0: "off", 1: "warn", 2: "error"}

DEFAULT_ECMA_VERSION: Literal["latest"] = "latest"
DEFAULT_SOURCE_TYPE: SourceType = "module"


class LintConfigError(ValueError):
    """Raised when a lint table cannot be read or fails validation."""


# --------------------------------------------------------------------------- #
# Glob matching
# --------------------------------------------------------------------------- #


def _find_closing(pattern: str, start: int, open_ch: str, close_ch: str) -> int:
    """Return the index of the bracket closing the one at `start`, or -1."""
    depth = 0
    for j in range(start, len(pattern)):
        if pattern[j] == open_ch:
            depth += 1
        elif pattern[j] == close_ch:
            depth -= 1
            if depth == 0:
                return j
    return -1


def _split_alternatives(body: str) -> list[str]:
    """Split a brace body on commas that are not nested in inner braces."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for ch in body:
        if ch == "," and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
        current.append(ch)
    parts.append("".join(current))
    return parts


def _translate_class(body: str) -> str:
    """Translate the inside of a `[...]` class; classes never match `/`."""
    negate = body[:1] in ("!", "^")
    if negate:
        body = body[1:]
    for special in ("\\", "^", "[", "]"):
        body = body.replace(special, "\\" + special)
    return f"[^/{body}]" if negate else f"(?!/)[{body}]"


def _translate(pattern: str) -> str:
    out: list[str] = []
    i = 0
    while i < len(pattern):
        ch = pattern[i]
        if pattern.startswith("**/", i):
            out.append("(?:.*/)?")
            i += 3
        elif pattern.startswith("**", i):
            out.append(".*")
            i += 2
        elif ch == "*":
            out.append("[^/]*")
            i += 1
        elif ch == "?":
            out.append("[^/]")
            i += 1
        elif ch == "[":
            # A leading `]` (after an optional negation) is a member, not the end.
            k = i + 1
            if pattern[k : k + 1] in ("!", "^"):
                k += 1
            if pattern[k : k + 1] == "]":
                k += 1
            end = pattern.find("]", k)
            if end == -1:
                out.append(re.escape(ch))
                i += 1
            else:
                out.append(_translate_class(pattern[i + 1 : end]))
                i = end + 1
        elif ch == "{":
            end = _find_closing(pattern, i, "{", "}")
            alternatives = _split_alternatives(pattern[i + 1 : end]) if end != -1 else []
            if len(alternatives) < 2:
                # `{}`, `{a}` and unbalanced braces are literal text.
                out.append(re.escape(ch))
                i += 1
            else:
                out.append("(?:" + "|".join(_translate(alt) for alt in alternatives) + ")")
                i = end + 1
        else:
            out.append(re.escape(ch))
            i += 1
    return "".join(out)


@lru_cache(maxsize=256)
def _compile_glob(pattern: str) -> re.Pattern[str]:
    """Translate a glob into a regex.

    Supported syntax: `**` spanning directories, `*` and `?` within one
    segment, character classes (`[0-9]`, `[!a]`) and brace alternatives
    (`{js,mjs}`, nestable).
    """
    if pattern.endswith("/"):
        pattern += "**"
    if pattern.startswith("./"):
        pattern = pattern[2:]
    return re.compile(_translate(pattern))


def _normalize_path(path: str | PurePath) -> str:
    text = PurePath(path).as_posix()
    while text.startswith("./"):
        text = text[2:]
    return text


def glob_match(pattern: str, path: str | PurePath) -> bool:
    """Return True if the POSIX form of `path` matches `pattern`."""
    return _compile_glob(pattern).fullmatch(_normalize_path(path)) is not None


# --------------------------------------------------------------------------- #
# Models
# --------------------------------------------------------------------------- #


class RuleSetting(BaseModel):
    """A normalized rule entry: severity plus rule-specific options."""

    model_config = ConfigDict(frozen=True)

    severity: Severity
    options: tuple[Any, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def _from_entry(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return data
        if isinstance(data, str | int):
            return {"severity": data}
        if isinstance(data, list | tuple):
            if not data:
                raise ValueError("rule entry must not be empty")
            return {"severity": data[0], "options": tuple(data[1:])}
        raise ValueError(f"unsupported rule entry: {data!r}")

    @field_validator("severity", mode="before")
    @classmethod
    def _normalize_severity(cls, value: Any) -> Any:
        # bool is an int subclass; True/False are not severities.
        if isinstance(value, bool):
            raise ValueError(f"unknown severity: {value!r}")
        if isinstance(value, int):
            if value not in _SEVERITY_ALIASES:
                raise ValueError(f"unknown severity: {value!r}")
            return _SEVERITY_ALIASES[value]
        return value

    @property
    def enabled(self) -> bool:
        """Return True unless the rule is switched off."""
        return self.severity != "off"

    def to_entry(self) -> str | list[Any]:
        """Return the entry in config-file shape (`"warn"` or `["error", ...]`)."""
        if not self.options:
            return self.severity
        return [self.severity, *self.options]

    @model_serializer
    def _serialize(self) -> str | list[Any]:
        return self.to_entry()


class LanguageOptions(BaseModel):
    """Language level of the files a block applies to."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    ecma_version: Literal["latest"] | int | None = Field(default=None, alias="ecmaVersion")
    source_type: SourceType | None = Field(default=None, alias="sourceType")

    def merged_with(self, other: LanguageOptions) -> LanguageOptions:
        """Return a copy where every option set in `other` wins."""
        return self.model_copy(update=other.model_dump(exclude_none=True))


class ConfigBlock(BaseModel):
    """One override block of the lint table."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    name: str | None = None
    files: list[str] = Field(default_factory=list)
    ignores: list[str] = Field(default_factory=list)
    language_options: LanguageOptions | None = Field(default=None, alias="languageOptions")
    rules: dict[str, RuleSetting] = Field(default_factory=dict)

    @property
    def is_global_ignore(self) -> bool:
        """A block holding only `ignores` excludes files from the whole table."""
        return bool(self.ignores) and not (
            self.files or self.rules or self.language_options is not None
        )

    def matches(self, path: str | PurePath) -> bool:
        """Return True if this block applies to `path`.

        A block without `files` applies to every path not hit by `ignores`.
        """
        if any(glob_match(p, path) for p in self.ignores):
            return False
        if not self.files:
            return True
        return any(glob_match(p, path) for p in self.files)


@dataclass(frozen=True)
class ResolvedConfig:
    """Effective settings for a single file after merging matching blocks."""

    path: str
    language_options: LanguageOptions
    rules: dict[str, RuleSetting] = field(default_factory=dict)

    def enabled_rules(self) -> dict[str, RuleSetting]:
        """Return rules whose severity is not `off`."""
        return {name: rule for name, rule in self.rules.items() if rule.enabled}


class LintConfig(BaseModel):
    """Ordered sequence of override blocks."""

    blocks: list[ConfigBlock] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.blocks)

    def is_ignored(self, path: str | PurePath) -> bool:
        """Return True if a global-ignore block excludes `path`."""
        return any(
            glob_match(p, path)
            for block in self.blocks
            if block.is_global_ignore
            for p in block.ignores
        )

    def matches(self, path: str | PurePath) -> bool:
        """Return True if `path` is selected for linting by this table."""
        if self.is_ignored(path):
            return False
        return any(
            block.files and block.matches(path)
            for block in self.blocks
            if not block.is_global_ignore
        )

    def resolve(self, path: str | PurePath) -> ResolvedConfig | None:
        """Merge all blocks applying to `path`, or return None if it is not linted."""
        if not self.matches(path):
            return None

        language = LanguageOptions(
            ecma_version=DEFAULT_ECMA_VERSION, source_type=DEFAULT_SOURCE_TYPE
        )
        rules: dict[str, RuleSetting] = {}
        for block in self.blocks:
            if block.is_global_ignore or not block.matches(path):
                continue
            if block.language_options is not None:
                language = language.merged_with(block.language_options)
            for name, setting in block.rules.items():
                previous = rules.get(name)
                if previous is not None and not setting.options:
                    setting = RuleSetting(severity=setting.severity, options=previous.options)
                rules[name] = setting

        return ResolvedConfig(path=_normalize_path(path), language_options=language, rules=rules)

    def to_data(self) -> list[dict[str, Any]]:
        """Dump the table in config-file shape (camelCase keys, compact entries)."""
        return [
            block.model_dump(by_alias=True, exclude_none=True, exclude_defaults=True)
            for block in self.blocks
        ]


# --------------------------------------------------------------------------- #
# Loading
# --------------------------------------------------------------------------- #


def parse_config(data: Any, source: str = "<memory>") -> LintConfig:
    """Validate raw block data (a list of mappings) into a `LintConfig`."""
    if not isinstance(data, list):
        raise LintConfigError(f"{source}: expected a list of config blocks")
    try:
        return LintConfig(blocks=data)
    except ValidationError as exc:
        raise LintConfigError(f"{source}: {exc}") from exc


def load_config(path: str | Path) -> LintConfig:
    """Read a JSON lint table from disk."""
    config_path = Path(path)
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise LintConfigError(f"cannot read lint config {config_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise LintConfigError(f"invalid JSON in {config_path}: {exc}") from exc
    return parse_config(raw, source=str(config_path))


__all__ = [
    "ConfigBlock",
    "LanguageOptions",
    "LintConfig",
    "LintConfigError",
    "ResolvedConfig",
    "RuleSetting",
    "Severity",
    "SourceType",
    "glob_match",
    "load_config",
    "parse_config",
]
