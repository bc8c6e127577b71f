"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, bookstore.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class SessionConfig(BaseModel):
    """[session] section: command loop behaviour."""

    model_config = {"frozen": True}

    sentinel: str = "end"
    summary: bool = False


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    local_dir: str = ".bookstore/plugins"

