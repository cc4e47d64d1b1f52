"""convert 커맨드 핸들러."""

from __future__ import annotations

import argparse

from variant_resolver.casing import convert
from variant_resolver.common import CaseStyle


def configure(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("convert")
    parser.add_argument("name")
    parser.add_argument("--style", required=False)
    parser.set_defaults(handler=execute)


def execute(args: argparse.Namespace) -> int:
    if args.style is not None:
        print(convert(args.name, CaseStyle.from_directive(args.style)))
        return 0

    for style in CaseStyle:
        print(f"{style.value:<22} {convert(args.name, style)}")
    return 0
