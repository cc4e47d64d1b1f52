"""Binding layer: maps resolution outcomes onto Python values."""

from .service import AlternativeDirectives, TypeBinding, bind_enum, bind_type, bind_wrapper

__all__ = ["AlternativeDirectives", "TypeBinding", "bind_enum", "bind_type", "bind_wrapper"]
