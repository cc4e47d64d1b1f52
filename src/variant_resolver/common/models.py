"""Shared data models for variant resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Union

from .exceptions import SpecError

FieldParser = Callable[[str], Any]


class CaseStyle(str, Enum):
    """Naming convention applied by ``rename_all``."""

    VERBATIM = "verbatim"
    LOWER = "lowercase"
    UPPER = "UPPERCASE"
    SNAKE = "snake_case"
    SCREAMING_SNAKE = "SCREAMING_SNAKE_CASE"
    KEBAB = "kebab-case"
    SCREAMING_KEBAB = "SCREAMING-KEBAB-CASE"
    PASCAL = "PascalCase"
    CAMEL = "camelCase"
    TITLE = "Title Case"
    TRAIN = "Train-Case"
    LOWER_SPACED = "lower case"
    UPPER_SPACED = "UPPER CASE"

    @classmethod
    def from_directive(cls, text: str) -> CaseStyle:
        """Directive spelling(``snake_case``) 또는 멤버 이름(``snake``)을 해석한다."""
        for style in cls:
            if style.value == text:
                return style

        key = text.strip().upper().replace("-", "_").replace(" ", "_")
        if key in cls.__members__:
            return cls.__members__[key]

        raise SpecError(f"unknown case style: {text!r}")


class FoldMode(str, Enum):
    CASE_INSENSITIVE_NAME = "case_insensitive_name"
    CASE_SENSITIVE_LITERAL = "case_sensitive_literal"


@dataclass(frozen=True)
class TypeDirectives:
    """Type-level directives (display name, default case style, wrapper flag)."""

    name: str
    rename_all: CaseStyle | None = None
    is_singular_wrapper: bool = False


@dataclass(frozen=True)
class AlternativeSpec:
    """One declared alternative (enum variant or the single form of a struct)."""

    name: str
    field_arity: int = 0
    rename: str | None = None
    rename_all: CaseStyle | None = None
    aliases: tuple[str, ...] = ()
    skip: bool = False
    default: bool = False
    forward: bool = False
    field_parser: FieldParser | None = field(default=None, compare=False)

    @property
    def has_naming_directives(self) -> bool:
        return self.rename is not None or self.rename_all is not None or bool(self.aliases)


@dataclass(frozen=True)
class MatchRule:
    alternative_id: str
    literal_set: frozenset[str]
    fold_mode: FoldMode

    def matches(self, text: str) -> bool:
        if text in self.literal_set:
            return True
        if self.fold_mode is FoldMode.CASE_INSENSITIVE_NAME:
            return _ascii_casefold(text) == _ascii_casefold(self.alternative_id)
        return False


@dataclass(frozen=True)
class ForwardRule:
    alternative_id: str
    parse: FieldParser = field(compare=False)


@dataclass(frozen=True)
class CompiledRuleSet:
    """Immutable result of ``compile_rules``; safe to share across threads."""

    type_name: str
    rules: tuple[MatchRule, ...] = ()
    default_id: str | None = None
    forwards: tuple[ForwardRule, ...] = ()
    wrapper: ForwardRule | None = None

    @property
    def forward_ids(self) -> tuple[str, ...]:
        return tuple(item.alternative_id for item in self.forwards)

    @property
    def is_wrapper(self) -> bool:
        return self.wrapper is not None

    @property
    def can_fail(self) -> bool:
        """False when a default alternative makes every input resolvable."""
        return self.default_id is None


@dataclass(frozen=True)
class Matched:
    alternative_id: str


@dataclass(frozen=True)
class Delegated:
    alternative_id: str
    value: Any


@dataclass(frozen=True)
class DefaultUsed:
    alternative_id: str


@dataclass(frozen=True)
class NoMatch:
    cause: Exception | None = field(default=None, compare=False)


Outcome = Union[Matched, Delegated, DefaultUsed, NoMatch]


@dataclass(frozen=True)
class Variant:
    """Value produced for types declared outside Python (YAML definitions)."""

    type_name: str
    name: str
    value: Any = None

    def __str__(self) -> str:
        if self.value is None:
            return f"{self.type_name}::{self.name}"
        return f"{self.type_name}::{self.name}({self.value!r})"


def _ascii_casefold(text: str) -> str:
    # str.lower() also folds non-ASCII letters
    return text.translate(_ASCII_LOWER)


_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)
