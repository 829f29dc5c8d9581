# topmark:header:start
#
#   project      : BodyFields
#   file         : __init__.py
#   file_relpath : src/bodyfields/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BodyFields configuration.

Use `MutableConfig` to layer configuration sources (defaults, TOML files,
GitHub Actions inputs, CLI overrides), then `MutableConfig.freeze` to obtain
the immutable `Config` consumed by `bodyfields.blocks.composer.compose`.
"""

from __future__ import annotations

from bodyfields.config.env import ActionTarget, action_target_from_env
from bodyfields.config.model import BlockPosition, Config, MutableConfig, action_input_env_name

__all__ = [
    "ActionTarget",
    "BlockPosition",
    "Config",
    "MutableConfig",
    "action_input_env_name",
    "action_target_from_env",
]
