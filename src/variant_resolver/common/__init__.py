"""Shared models and exceptions."""

from .exceptions import ParseError, SpecError, UserInputError
from .models import (
    AlternativeSpec,
    CaseStyle,
    CompiledRuleSet,
    DefaultUsed,
    Delegated,
    FieldParser,
    FoldMode,
    ForwardRule,
    MatchRule,
    Matched,
    NoMatch,
    Outcome,
    TypeDirectives,
    Variant,
)

__all__ = [
    "AlternativeSpec",
    "CaseStyle",
    "CompiledRuleSet",
    "DefaultUsed",
    "Delegated",
    "FieldParser",
    "FoldMode",
    "ForwardRule",
    "MatchRule",
    "Matched",
    "NoMatch",
    "Outcome",
    "ParseError",
    "SpecError",
    "TypeDirectives",
    "UserInputError",
    "Variant",
]
