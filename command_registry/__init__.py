"""
command_registry: resolve command words and aliases to canonical command names.
"""

from .registry import build_registry
from .utils.alias_resolver import (
    AliasCollision,
    find_alias_collisions,
    iter_registry_entries,
    lookup_command,
    resolve_command_name,
)

__all__ = [
    "AliasCollision",
    "build_registry",
    "find_alias_collisions",
    "iter_registry_entries",
    "lookup_command",
    "resolve_command_name",
]
