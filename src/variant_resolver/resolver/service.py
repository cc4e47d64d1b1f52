"""Resolver: classifies one input token against a compiled rule set."""

from __future__ import annotations

import logging

from variant_resolver.common import (
    CompiledRuleSet,
    DefaultUsed,
    Delegated,
    Matched,
    NoMatch,
    Outcome,
)

logger = logging.getLogger(__name__)

# Errors a field parser raises to say "not mine"; anything else propagates.
_DELEGATE_REJECTIONS = (ValueError, TypeError)


def resolve(rules: CompiledRuleSet, text: str) -> Outcome:
    """Runs forwarding, literal and default passes in that order."""

    if rules.wrapper is not None:
        try:
            value = rules.wrapper.parse(text)
        except _DELEGATE_REJECTIONS as exc:
            return NoMatch(cause=exc)
        return Delegated(alternative_id=rules.wrapper.alternative_id, value=value)

    for forward in rules.forwards:
        try:
            value = forward.parse(text)
        except _DELEGATE_REJECTIONS as exc:
            logger.debug(
                "%s::%s: forward rejected %r (%s)",
                rules.type_name,
                forward.alternative_id,
                text,
                exc,
            )
            continue
        return Delegated(alternative_id=forward.alternative_id, value=value)

    for rule in rules.rules:
        if rule.matches(text):
            return Matched(alternative_id=rule.alternative_id)

    if rules.default_id is not None:
        return DefaultUsed(alternative_id=rules.default_id)

    return NoMatch()
