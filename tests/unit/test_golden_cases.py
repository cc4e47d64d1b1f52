"""골든 케이스 검증 도구 테스트."""

from __future__ import annotations

import importlib.util
from pathlib import Path

from variant_resolver.binding import bind_type
from variant_resolver.common import AlternativeSpec, TypeDirectives
from variant_resolver.definitions import load_definitions

ROOT_DIR = Path(__file__).resolve().parents[2]
FIXTURES_DIR = ROOT_DIR / "tests" / "fixtures"


def _load_check_module():  # type: ignore[no-untyped-def]
    """tools/ci/check_golden_cases.py를 모듈로 로드한다."""
    spec_path = ROOT_DIR / "tools" / "ci" / "check_golden_cases.py"
    spec = importlib.util.spec_from_file_location("check_golden_cases", str(spec_path))
    assert spec is not None
    assert spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_fixture_golden_cases_pass() -> None:
    mod = _load_check_module()

    code = mod.main(
        [
            "--defs",
            str(FIXTURES_DIR / "definitions.yaml"),
            "--golden",
            str(FIXTURES_DIR / "golden_cases.yaml"),
        ]
    )
    assert code == 0


def test_evaluate_cases_reports_mismatch() -> None:
    """기대값과 다르면 mismatch 메시지를 반환한다."""
    mod = _load_check_module()
    bindings = load_definitions(FIXTURES_DIR / "definitions.yaml")
    cases = [
        {"type": "Size", "input": "s", "expect": "Size::Small"},
        {"type": "Size", "input": "s", "expect": "Size::ExtraLarge"},
        {"type": "Missing", "input": "x", "expect": None},
    ]

    mismatches = mod.evaluate_cases(bindings, cases)
    assert len(mismatches) == 2
    assert "case 1" in mismatches[0]
    assert "unknown type Missing" in mismatches[1]


def test_missing_golden_file_returns_error(tmp_path: Path) -> None:
    mod = _load_check_module()

    code = mod.main(
        ["--defs", str(FIXTURES_DIR / "definitions.yaml"), "--golden", str(tmp_path / "nope.yaml")]
    )
    assert code == 1


def test_evaluate_cases_distinguishes_none_value_from_failure() -> None:
    """값이 None 인 unit 과 파싱 실패를 구분한다."""
    mod = _load_check_module()
    binding = bind_type(
        TypeDirectives(name="Opt"),
        [AlternativeSpec(name="Nothing")],
        units={"Nothing": None},
    )
    bindings = {"Opt": binding}

    assert mod.evaluate_cases(bindings, [{"type": "Opt", "input": "nothing", "expect": "None"}]) == []

    mismatches = mod.evaluate_cases(bindings, [{"type": "Opt", "input": "nothing", "expect": None}])
    assert len(mismatches) == 1
    assert "'None'" in mismatches[0]
