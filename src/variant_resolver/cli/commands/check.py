"""check 커맨드 핸들러."""

from __future__ import annotations

import argparse
from pathlib import Path

from variant_resolver.definitions import load_definitions


def configure(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("check")
    parser.add_argument("--defs", required=True)
    parser.set_defaults(handler=execute)


def execute(args: argparse.Namespace) -> int:
    bindings = load_definitions(Path(args.defs))

    for binding in bindings.values():
        rules = binding.rules
        if rules.wrapper is not None:
            print(f"[OK] {rules.type_name}: wrapper over {rules.wrapper.alternative_id}")
            continue
        print(
            f"[OK] {rules.type_name}: "
            f"rules={len(rules.rules)}, "
            f"forwards={len(rules.forwards)}, "
            f"default={rules.default_id or '-'}, "
            f"can_fail={'yes' if rules.can_fail else 'no'}"
        )
    return 0
