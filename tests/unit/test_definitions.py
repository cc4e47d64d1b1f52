"""definitions 모듈 테스트."""

from __future__ import annotations

from pathlib import Path
from uuid import UUID

import pytest

from variant_resolver.common import ParseError, SpecError, UserInputError, Variant
from variant_resolver.definitions import BUILTIN_FIELD_PARSERS, load_definitions


FIXTURES_DIR = Path(__file__).resolve().parents[1] / "fixtures"


def test_load_definitions_from_yaml() -> None:
    """fixture definitions.yaml 로딩 성공."""
    bindings = load_definitions(FIXTURES_DIR / "definitions.yaml")

    assert list(bindings) == ["Size", "Color", "Limit", "Port", "Shade"]
    assert bindings["Size"].parse("extra-large") == Variant("Size", "ExtraLarge")
    assert bindings["Color"].can_fail is False
    assert bindings["Limit"].parse("42") == Variant("Limit", "Count", 42)
    assert bindings["Port"].rules.is_wrapper


def test_forward_to_previously_defined_type() -> None:
    """먼저 정의된 타입으로 forward 하면 그 타입의 파서를 사용한다."""
    bindings = load_definitions(FIXTURES_DIR / "definitions.yaml")

    shade = bindings["Shade"]
    assert shade.parse("navy") == Variant("Shade", "Base", Variant("Color", "DarkBlue"))
    # Color never fails, so Base captures everything before Blank is tried
    assert shade.parse("blank") == Variant("Shade", "Base", Variant("Color", "Other"))


def test_skip_alternative_is_not_parseable() -> None:
    bindings = load_definitions(FIXTURES_DIR / "definitions.yaml")

    with pytest.raises(ParseError):
        bindings["Size"].parse("legacy")


def test_load_definitions_missing_file_raises() -> None:
    """파일 없으면 UserInputError."""
    with pytest.raises(UserInputError, match="not found"):
        load_definitions(Path("/nonexistent/definitions.yaml"))


def test_load_definitions_invalid_yaml_raises(tmp_path: Path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("types: [\n", encoding="utf-8")

    with pytest.raises(UserInputError, match="Invalid YAML"):
        load_definitions(path)


def test_load_definitions_requires_types_list(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("other: 1\n", encoding="utf-8")

    with pytest.raises(UserInputError, match="'types' list missing"):
        load_definitions(path)


def test_load_definitions_surfaces_spec_errors(tmp_path: Path) -> None:
    path = tmp_path / "defs.yaml"
    path.write_text(
        """
types:
  - name: Mode
    alternatives:
      - name: A
        default: true
      - name: B
        default: true
""",
        encoding="utf-8",
    )

    with pytest.raises(SpecError, match="multiple default"):
        load_definitions(path)


def test_load_definitions_rejects_unknown_field_type(tmp_path: Path) -> None:
    path = tmp_path / "defs.yaml"
    path.write_text(
        """
types:
  - name: Value
    alternatives:
      - name: Later
        forward: DefinedBelow
  - name: DefinedBelow
    alternatives:
      - name: X
""",
        encoding="utf-8",
    )

    with pytest.raises(SpecError, match="unknown field type"):
        load_definitions(path)


def test_load_definitions_rejects_unknown_case_style(tmp_path: Path) -> None:
    path = tmp_path / "defs.yaml"
    path.write_text(
        "types:\n  - name: T\n    rename_all: wavy\n    alternatives:\n      - name: A\n",
        encoding="utf-8",
    )

    with pytest.raises(SpecError, match="unknown case style") as exc:
        load_definitions(path)
    assert exc.value.type_name == "T"


def test_builtin_field_parsers_reject_with_value_error() -> None:
    assert BUILTIN_FIELD_PARSERS["bool"]("true") is True
    assert str(BUILTIN_FIELD_PARSERS["decimal"]("1.50")) == "1.50"
    assert BUILTIN_FIELD_PARSERS["uuid"]("12345678-1234-5678-1234-567812345678") == UUID(
        "12345678-1234-5678-1234-567812345678"
    )

    for name, text in (("bool", "yes"), ("decimal", "abc"), ("uuid", "nope"), ("int", "1.5")):
        with pytest.raises(ValueError):
            BUILTIN_FIELD_PARSERS[name](text)


def _write_defs(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "defs.yaml"
    path.write_text(body, encoding="utf-8")
    return path


def test_null_aliases_are_treated_as_empty(tmp_path: Path) -> None:
    path = _write_defs(
        tmp_path,
        "types:\n  - name: T\n    alternatives:\n      - name: A\n        aliases:\n",
    )

    bindings = load_definitions(path)
    assert bindings["T"].parse("a") == Variant("T", "A")


def test_non_list_aliases_raise_user_input_error(tmp_path: Path) -> None:
    path = _write_defs(
        tmp_path,
        "types:\n  - name: T\n    alternatives:\n      - name: A\n        aliases: {x: 1}\n",
    )

    with pytest.raises(UserInputError, match="'aliases' must be a list"):
        load_definitions(path)


@pytest.mark.parametrize(
    "body",
    [
        "types:\n  - name: T\n    alternatives:\n      - name: A\n        skip: \"false\"\n",
        "types:\n  - name: T\n    alternatives:\n      - name: A\n        default: 1\n",
        "types:\n  - name: T\n    wrapper: \"yes\"\n    alternatives:\n      - name: A\n        field: int\n",
    ],
)
def test_non_boolean_flags_raise_user_input_error(tmp_path: Path, body: str) -> None:
    """문자열 "false" 같은 값은 bool 로 변환하지 않고 거부한다."""
    with pytest.raises(UserInputError, match="must be true or false"):
        load_definitions(_write_defs(tmp_path, body))


def test_field_key_outside_wrapper_raises_user_input_error(tmp_path: Path) -> None:
    path = _write_defs(
        tmp_path,
        "types:\n  - name: T\n    alternatives:\n      - name: N\n        field: int\n",
    )

    with pytest.raises(UserInputError, match="only valid on wrapper types"):
        load_definitions(path)
