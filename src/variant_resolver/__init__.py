"""Resolve whole-token strings into declared alternatives."""

from variant_resolver.binding import (
    AlternativeDirectives,
    TypeBinding,
    bind_enum,
    bind_type,
    bind_wrapper,
)
from variant_resolver.casing import convert
from variant_resolver.common import (
    AlternativeSpec,
    CaseStyle,
    CompiledRuleSet,
    DefaultUsed,
    Delegated,
    Matched,
    NoMatch,
    Outcome,
    ParseError,
    SpecError,
    TypeDirectives,
)
from variant_resolver.compiler import compile_rules
from variant_resolver.resolver import resolve

__version__ = "0.1.0"

__all__ = [
    "AlternativeDirectives",
    "AlternativeSpec",
    "CaseStyle",
    "CompiledRuleSet",
    "DefaultUsed",
    "Delegated",
    "Matched",
    "NoMatch",
    "Outcome",
    "ParseError",
    "SpecError",
    "TypeBinding",
    "TypeDirectives",
    "bind_enum",
    "bind_type",
    "bind_wrapper",
    "compile_rules",
    "convert",
    "resolve",
]
