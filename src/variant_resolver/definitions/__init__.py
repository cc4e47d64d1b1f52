"""타입 정의 로딩 모듈."""

from .loader import BUILTIN_FIELD_PARSERS, load_definitions

__all__ = ["BUILTIN_FIELD_PARSERS", "load_definitions"]
