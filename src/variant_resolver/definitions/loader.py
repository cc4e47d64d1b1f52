"""YAML 기반 타입 정의 로딩."""

from __future__ import annotations

import logging
import uuid
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Callable

import yaml

from variant_resolver.binding import TypeBinding, bind_type
from variant_resolver.common import (
    AlternativeSpec,
    CaseStyle,
    FieldParser,
    SpecError,
    TypeDirectives,
    UserInputError,
    Variant,
)

logger = logging.getLogger(__name__)


def _parse_bool(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError(f"invalid bool literal: {text!r}")


def _parse_decimal(text: str) -> Decimal:
    try:
        return Decimal(text)
    except InvalidOperation as exc:
        raise ValueError(f"invalid decimal literal: {text!r}") from exc


BUILTIN_FIELD_PARSERS: dict[str, FieldParser] = {
    "int": int,
    "float": float,
    "decimal": _parse_decimal,
    "str": str,
    "bool": _parse_bool,
    "uuid": uuid.UUID,
}


def load_definitions(config_path: Path) -> dict[str, TypeBinding]:
    """타입 정의 YAML을 읽어 타입 이름 -> TypeBinding 매핑을 반환한다."""
    data = _load_yaml(config_path)

    raw_types = data.get("types")
    if not isinstance(raw_types, list):
        raise UserInputError(f"'types' list missing in definitions file: {config_path}")

    bindings: dict[str, TypeBinding] = {}
    for raw in raw_types:
        if not isinstance(raw, dict) or not raw.get("name"):
            raise UserInputError(f"type entry without name in {config_path}: {raw!r}")

        binding = _build_binding(raw, bindings)
        if binding.type_name in bindings:
            raise SpecError("type defined more than once", type_name=binding.type_name)
        bindings[binding.type_name] = binding

    logger.info("definitions loaded: path=%s, types=%d", config_path, len(bindings))
    return bindings


def _build_binding(raw: dict[str, Any], known: dict[str, TypeBinding]) -> TypeBinding:
    type_name = str(raw["name"])
    rename_all = raw.get("rename_all")

    type_level = TypeDirectives(
        name=type_name,
        rename_all=_case_style(rename_all, type_name) if rename_all is not None else None,
        is_singular_wrapper=_flag(raw, "wrapper", type_name),
    )

    raw_alternatives = raw.get("alternatives", [])
    if not isinstance(raw_alternatives, list):
        raise UserInputError(f"{type_name}: 'alternatives' must be a list")

    alternatives: list[AlternativeSpec] = []
    units: dict[str, Variant] = {}
    builders: dict[str, Callable[[Any], Any]] = {}

    for item in raw_alternatives:
        if not isinstance(item, dict) or not item.get("name"):
            raise UserInputError(f"{type_name}: alternative entry without name: {item!r}")

        spec = _build_alternative(type_name, item, known, type_level.is_singular_wrapper)
        alternatives.append(spec)
        if spec.field_arity == 0:
            units[spec.name] = Variant(type_name=type_name, name=spec.name)
        else:
            builders[spec.name] = _variant_builder(type_name, spec.name)

    return bind_type(type_level, alternatives, units=units, builders=builders)


def _build_alternative(
    type_name: str,
    item: dict[str, Any],
    known: dict[str, TypeBinding],
    wrapper: bool,
) -> AlternativeSpec:
    name = str(item["name"])
    if wrapper:
        field_type = item.get("field", item.get("forward"))
    elif "field" in item:
        raise UserInputError(
            f"{type_name}::{name}: 'field' is only valid on wrapper types; use 'forward'"
        )
    else:
        field_type = item.get("forward")
    rename_all = item.get("rename_all")
    rename = item.get("rename")

    aliases = item.get("aliases")
    if aliases is None:
        aliases = []
    elif isinstance(aliases, str):
        aliases = [aliases]
    elif not isinstance(aliases, list):
        raise UserInputError(f"{type_name}: 'aliases' must be a list")

    return AlternativeSpec(
        name=name,
        field_arity=1 if field_type is not None else 0,
        rename=str(rename) if rename is not None else None,
        rename_all=_case_style(rename_all, type_name) if rename_all is not None else None,
        aliases=tuple(str(alias) for alias in aliases),
        skip=_flag(item, "skip", type_name),
        default=_flag(item, "default", type_name),
        forward=field_type is not None and not wrapper,
        field_parser=_field_parser(type_name, name, field_type, known) if field_type is not None else None,
    )


def _field_parser(
    type_name: str,
    alternative: str,
    field_type: Any,
    known: dict[str, TypeBinding],
) -> FieldParser:
    key = str(field_type)
    if key in BUILTIN_FIELD_PARSERS:
        return BUILTIN_FIELD_PARSERS[key]
    if key in known:
        return known[key].parse
    raise SpecError(f"unknown field type: {key!r}", type_name=type_name, alternative=alternative)


def _flag(entry: dict[str, Any], key: str, type_name: str) -> bool:
    value = entry.get(key, False)
    if not isinstance(value, bool):
        raise UserInputError(f"{type_name}: '{key}' must be true or false, got {value!r}")
    return value


def _case_style(value: Any, type_name: str) -> CaseStyle:
    try:
        return CaseStyle.from_directive(str(value))
    except SpecError as exc:
        raise SpecError(exc.message, type_name=type_name) from exc


def _variant_builder(type_name: str, name: str) -> Callable[[Any], Variant]:
    def build(value: Any) -> Variant:
        return Variant(type_name=type_name, name=name, value=value)

    return build


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise UserInputError(f"Definitions file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            result = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise UserInputError(f"Invalid YAML in definitions file {path}: {exc}") from exc

    if not isinstance(result, dict):
        raise UserInputError(f"Definitions file must contain a mapping: {path}")
    return result
