"""Rule compiler module."""

from .service import compile_rules

__all__ = ["compile_rules"]
