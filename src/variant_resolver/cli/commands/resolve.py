"""resolve 커맨드 핸들러."""

from __future__ import annotations

import argparse
from pathlib import Path

from variant_resolver.common import NoMatch, UserInputError
from variant_resolver.definitions import load_definitions
from variant_resolver.resolver import resolve


def configure(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("resolve")
    parser.add_argument("--defs", required=True)
    parser.add_argument("--type", dest="type_name", required=True)
    parser.add_argument("inputs", nargs="+")
    parser.set_defaults(handler=execute)


def execute(args: argparse.Namespace) -> int:
    bindings = load_definitions(Path(args.defs))
    binding = bindings.get(args.type_name)
    if binding is None:
        raise UserInputError(
            f"Unknown type {args.type_name!r}; defined: {', '.join(bindings) or '-'}"
        )

    failures = 0
    for text in args.inputs:
        outcome = resolve(binding.rules, text)
        if isinstance(outcome, NoMatch):
            failures += 1
            reason = outcome.cause if outcome.cause is not None else "no match"
            print(f"[FAIL] {text!r}: {reason}")
            continue

        value = binding.construct(outcome, text)
        print(f"[OK] {text!r} -> {value} ({type(outcome).__name__})")

    if failures:
        print(f"[WARN] unresolved inputs: {failures}/{len(args.inputs)}")
        return 2
    return 0
