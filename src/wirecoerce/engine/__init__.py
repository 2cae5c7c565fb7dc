"""Coercion engine: decoded JSON in, typed domain values out."""

from wirecoerce.engine.coerce import Coercer, coerce, decode_model

__all__ = ["Coercer", "coerce", "decode_model"]
