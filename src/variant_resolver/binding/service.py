"""Binds compiled rule sets to concrete Python values."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable, Mapping

from variant_resolver.common import (
    AlternativeSpec,
    CaseStyle,
    CompiledRuleSet,
    Delegated,
    FieldParser,
    NoMatch,
    Outcome,
    ParseError,
    SpecError,
    TypeDirectives,
)
from variant_resolver.compiler import compile_rules
from variant_resolver.resolver import resolve


@dataclass(frozen=True)
class AlternativeDirectives:
    """Per-member directives for ``bind_enum``."""

    rename: str | None = None
    rename_all: CaseStyle | None = None
    aliases: tuple[str, ...] = ()
    skip: bool = False
    default: bool = False


@dataclass(frozen=True)
class TypeBinding:
    """A compiled type plus the values its alternatives construct.

    ``units`` maps unit alternatives to their value. ``builders`` maps
    single-field alternatives to a callable applied to the delegated value;
    a missing builder returns the delegated value unchanged.
    """

    rules: CompiledRuleSet
    units: Mapping[str, Any] = field(default_factory=dict)
    builders: Mapping[str, Callable[[Any], Any]] = field(default_factory=dict)

    @property
    def type_name(self) -> str:
        return self.rules.type_name

    @property
    def can_fail(self) -> bool:
        return self.rules.can_fail

    def parse(self, text: str) -> Any:
        return self.construct(resolve(self.rules, text), text)

    def construct(self, outcome: Outcome, text: str) -> Any:
        """Maps a resolution outcome onto a value; raises on NoMatch."""
        if isinstance(outcome, NoMatch):
            if outcome.cause is not None:
                raise outcome.cause
            raise ParseError(self.type_name, text)

        if isinstance(outcome, Delegated):
            builder = self.builders.get(outcome.alternative_id)
            return outcome.value if builder is None else builder(outcome.value)

        return self.units[outcome.alternative_id]

    def try_parse(self, text: str) -> Any | None:
        try:
            return self.parse(text)
        except (ValueError, TypeError):
            return None

    __call__ = parse


def bind_type(
    type_level: TypeDirectives,
    alternatives: Iterable[AlternativeSpec],
    units: Mapping[str, Any],
    builders: Mapping[str, Callable[[Any], Any]] | None = None,
) -> TypeBinding:
    items = tuple(alternatives)
    rules = compile_rules(type_level, items)

    for item in items:
        if item.field_arity == 0 and not item.skip and item.name not in units:
            raise SpecError(
                "no value bound for unit alternative",
                type_name=rules.type_name,
                alternative=item.name,
            )

    return TypeBinding(rules=rules, units=dict(units), builders=dict(builders or {}))


def bind_enum(
    enum_cls: type[Enum],
    *,
    rename_all: CaseStyle | None = None,
    directives: Mapping[str, AlternativeDirectives] | None = None,
) -> TypeBinding:
    """Builds a string parser for ``enum_cls``; members become unit alternatives."""

    directives = directives or {}
    unknown = set(directives) - set(enum_cls.__members__)
    if unknown:
        raise SpecError(
            f"directives for unknown members: {', '.join(sorted(unknown))}",
            type_name=enum_cls.__name__,
        )

    alternatives = []
    for name in enum_cls.__members__:
        item = directives.get(name, AlternativeDirectives())
        alternatives.append(
            AlternativeSpec(
                name=name,
                rename=item.rename,
                rename_all=item.rename_all,
                aliases=item.aliases,
                skip=item.skip,
                default=item.default,
            )
        )

    return bind_type(
        TypeDirectives(name=enum_cls.__name__, rename_all=rename_all),
        alternatives,
        units=dict(enum_cls.__members__),
    )


def bind_wrapper(
    type_name: str,
    field_parser: FieldParser,
    constructor: Callable[[Any], Any] | None = None,
    *,
    field_name: str = "0",
) -> TypeBinding:
    """Builds a delegate-only parser for a single-field wrapper type."""

    builders = {field_name: constructor} if constructor is not None else {}
    return bind_type(
        TypeDirectives(name=type_name, is_singular_wrapper=True),
        [AlternativeSpec(name=field_name, field_arity=1, field_parser=field_parser)],
        units={},
        builders=builders,
    )
