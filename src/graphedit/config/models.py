"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``graphedit.toml`` only
contains overrides. An empty file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel

from graphedit.domain.types import DEFAULT_NODE_TYPE
from graphedit.infrastructure.database.engine import DEFAULT_DIRECTORY, DEFAULT_FILENAME
from graphedit.infrastructure.persistence import DEFAULT_KEY


class StorageConfig(BaseModel):
    """[storage] section."""

    model_config = {"frozen": True}

    directory: str = DEFAULT_DIRECTORY
    filename: str = DEFAULT_FILENAME
    key: str = DEFAULT_KEY


class CanvasConfig(BaseModel):
    """[canvas] section."""

    model_config = {"frozen": True}

    node_type: str = DEFAULT_NODE_TYPE
    default_x: float = 0.0
    default_y: float = 0.0

