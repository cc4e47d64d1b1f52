"""Custom exceptions for definition errors, parse failures and exit mapping."""

from __future__ import annotations


class UserInputError(Exception):
    """Raised when user input or environment is invalid."""


class SpecError(ValueError):
    """Raised when a type definition cannot be compiled into match rules."""

    def __init__(
        self,
        message: str,
        *,
        type_name: str | None = None,
        alternative: str | None = None,
    ) -> None:
        self.message = message
        self.type_name = type_name
        self.alternative = alternative
        super().__init__(self._render())

    def _render(self) -> str:
        if self.type_name and self.alternative:
            return f"{self.type_name}::{self.alternative}: {self.message}"
        if self.type_name:
            return f"{self.type_name}: {self.message}"
        return self.message


class ParseError(ValueError):
    """Raised when an input token matches no alternative of a type."""

    def __init__(self, type_name: str, text: str) -> None:
        self.type_name = type_name
        self.text = text
        super().__init__(f"failed to parse {text!r} as {type_name}")
