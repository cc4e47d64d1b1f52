#!/usr/bin/env python3
"""Check resolution results against a golden case file.

Expected golden YAML format:
cases:
  - type: Size
    input: "xl"
    expect: "Size::ExtraLarge"     # str() of the parsed value
  - type: Size
    input: "zzz"
    expect: null                   # input must fail to parse
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

import yaml

from variant_resolver.common import SpecError, UserInputError
from variant_resolver.definitions import load_definitions


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser()
    parser.add_argument("--defs", required=True, help="Path to type definitions YAML")
    parser.add_argument(
        "--golden",
        default="tests/fixtures/golden_cases.yaml",
        help="Path to golden cases YAML",
    )
    return parser.parse_args(argv)


def evaluate_cases(bindings: dict[str, Any], cases: list[dict[str, Any]]) -> list[str]:
    """Returns one message per mismatching case."""
    mismatches: list[str] = []
    for index, case in enumerate(cases):
        type_name = str(case["type"])
        text = str(case["input"])
        expected = case.get("expect")

        binding = bindings.get(type_name)
        if binding is None:
            mismatches.append(f"case {index}: unknown type {type_name}")
            continue

        try:
            actual: str | None = str(binding.parse(text))
        except (ValueError, TypeError):
            actual = None
        if actual != (None if expected is None else str(expected)):
            mismatches.append(
                f"case {index}: {type_name} {text!r} -> {actual!r}, expected {expected!r}"
            )
    return mismatches


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    golden_path = Path(args.golden)
    if not golden_path.exists():
        print(f"[ERROR] Golden file not found: {golden_path}")
        return 1

    payload = yaml.safe_load(golden_path.read_text(encoding="utf-8")) or {}
    cases = payload.get("cases")
    if not isinstance(cases, list):
        print("[ERROR] Missing 'cases' list in golden file")
        return 1

    try:
        mismatches = evaluate_cases(load_definitions(Path(args.defs)), cases)
    except KeyError as exc:
        print(f"[ERROR] Missing required key in golden case: {exc}")
        return 1
    except (UserInputError, SpecError) as exc:
        print(f"[ERROR] Invalid definitions: {exc}")
        return 1

    for message in mismatches:
        print(f"[ERROR] {message}")
    if mismatches:
        return 1

    print(f"[OK] Golden cases passed ({len(cases)} cases)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
