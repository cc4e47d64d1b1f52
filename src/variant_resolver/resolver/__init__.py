"""Resolver module."""

from .service import resolve

__all__ = ["resolve"]
