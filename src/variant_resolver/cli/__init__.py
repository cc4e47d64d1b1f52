"""CLI module."""

from .parser import build_parser

__all__ = ["build_parser"]
