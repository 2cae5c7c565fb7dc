"""Pydantic configuration sections with code-baked defaults.

Sparse TOML contract: defaults live here, wirecoerce.toml only holds
overrides.  An empty file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel


class DecodeConfig(BaseModel):
    """[decode] section."""

    model_config = {"frozen": True}

    strict: bool = False
    parse_dates: bool = True
