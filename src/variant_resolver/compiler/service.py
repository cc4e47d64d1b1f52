"""Rule compiler: validates alternatives and builds a CompiledRuleSet."""

from __future__ import annotations

import logging
from typing import Iterable, cast

from variant_resolver.casing import convert
from variant_resolver.common import (
    AlternativeSpec,
    CompiledRuleSet,
    FieldParser,
    FoldMode,
    ForwardRule,
    MatchRule,
    SpecError,
    TypeDirectives,
)

logger = logging.getLogger(__name__)


def compile_rules(
    type_level: TypeDirectives,
    alternatives: Iterable[AlternativeSpec],
) -> CompiledRuleSet:
    """Compiles ordered alternatives into match rules.

    Raises ``SpecError`` on the first definitional problem found.
    """

    items = tuple(alternatives)
    _validate(type_level, items)

    if type_level.is_singular_wrapper:
        return _compile_wrapper(type_level, items[0])

    rules: list[MatchRule] = []
    forwards: list[ForwardRule] = []
    default_id: str | None = None

    for item in items:
        if item.default:
            default_id = item.name

        if item.skip or item.forward:
            if item.has_naming_directives:
                logger.debug(
                    "%s::%s: naming directives ignored on %s alternative",
                    type_level.name,
                    item.name,
                    "skip" if item.skip else "forward",
                )
            if item.forward and not item.skip:
                forwards.append(
                    ForwardRule(alternative_id=item.name, parse=cast(FieldParser, item.field_parser))
                )
            continue

        rules.append(_build_rule(type_level, item))

    compiled = CompiledRuleSet(
        type_name=type_level.name,
        rules=tuple(rules),
        default_id=default_id,
        forwards=tuple(forwards),
    )
    logger.debug(
        "compiled %s: rules=%d, forwards=%d, default=%s",
        compiled.type_name,
        len(compiled.rules),
        len(compiled.forwards),
        compiled.default_id,
    )
    return compiled


def _build_rule(type_level: TypeDirectives, item: AlternativeSpec) -> MatchRule:
    aliases = frozenset(item.aliases)

    if item.rename is not None:
        return MatchRule(
            alternative_id=item.name,
            literal_set=aliases | {item.rename},
            fold_mode=FoldMode.CASE_SENSITIVE_LITERAL,
        )

    style = item.rename_all if item.rename_all is not None else type_level.rename_all
    if style is not None:
        return MatchRule(
            alternative_id=item.name,
            literal_set=aliases | {convert(item.name, style)},
            fold_mode=FoldMode.CASE_SENSITIVE_LITERAL,
        )

    return MatchRule(
        alternative_id=item.name,
        literal_set=aliases,
        fold_mode=FoldMode.CASE_INSENSITIVE_NAME,
    )


def _compile_wrapper(type_level: TypeDirectives, item: AlternativeSpec) -> CompiledRuleSet:
    if item.has_naming_directives or type_level.rename_all is not None:
        logger.debug("%s: naming directives ignored on wrapper type", type_level.name)

    return CompiledRuleSet(
        type_name=type_level.name,
        wrapper=ForwardRule(alternative_id=item.name, parse=cast(FieldParser, item.field_parser)),
    )


def _validate(type_level: TypeDirectives, items: tuple[AlternativeSpec, ...]) -> None:
    type_name = type_level.name

    if type_level.is_singular_wrapper:
        if len(items) != 1 or items[0].field_arity != 1:
            raise SpecError(
                "wrapper type requires exactly one single-field alternative",
                type_name=type_name,
            )
        if items[0].skip or items[0].default:
            raise SpecError(
                "wrapper alternative cannot be skip or default",
                type_name=type_name,
                alternative=items[0].name,
            )
        _require_parser(type_name, items[0])
        return

    seen: set[str] = set()
    default_name: str | None = None

    for item in items:
        if item.name in seen:
            raise SpecError("duplicate alternative name", type_name=type_name, alternative=item.name)
        seen.add(item.name)

        if item.field_arity not in (0, 1):
            raise SpecError(
                f"unsupported field arity {item.field_arity}",
                type_name=type_name,
                alternative=item.name,
            )

        if item.skip and item.default:
            raise SpecError(
                "skip and default cannot be combined",
                type_name=type_name,
                alternative=item.name,
            )

        if item.forward and item.field_arity != 1:
            raise SpecError(
                "forward requires exactly one field",
                type_name=type_name,
                alternative=item.name,
            )

        if item.field_arity == 1 and not item.forward and not item.skip:
            raise SpecError(
                "single-field alternative must be marked forward",
                type_name=type_name,
                alternative=item.name,
            )

        if item.forward:
            _require_parser(type_name, item)

        if item.default:
            if item.field_arity != 0:
                raise SpecError(
                    "default alternative must have no fields",
                    type_name=type_name,
                    alternative=item.name,
                )
            if default_name is not None:
                raise SpecError(
                    f"multiple default alternatives ({default_name}, {item.name})",
                    type_name=type_name,
                )
            default_name = item.name


def _require_parser(type_name: str, item: AlternativeSpec) -> None:
    if item.field_parser is None:
        raise SpecError("missing field parser", type_name=type_name, alternative=item.name)
