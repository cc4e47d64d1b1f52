"""Case conversion module."""

from .service import convert, split_words

from variant_resolver.common import CaseStyle

__all__ = ["CaseStyle", "convert", "split_words"]
