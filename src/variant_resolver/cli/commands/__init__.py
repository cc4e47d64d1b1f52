"""CLI 커맨드 모듈."""

from __future__ import annotations

from types import ModuleType

from variant_resolver.cli.commands import check, convert, resolve

COMMAND_MODULES: list[ModuleType] = [check, resolve, convert]

__all__ = ["COMMAND_MODULES"]
