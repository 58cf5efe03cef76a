"""
Command alias resolution.

Maps a user-supplied command word to the canonical name it is registered under.
The registry is scanned in insertion order without stopping at the first hit,
so when several entries match the same word the LAST one wins. That includes a
later entry aliasing an earlier entry's canonical name. Callers depend on this
ordering; find_alias_collisions() reports where it comes into play.

The registry is never mutated here. Callers must not mutate it concurrently
with a resolution.
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import TypeVar

from ..models.command import AliasedCommand
from ..structured_logging.enhanced_logging_config import get_logger

logger = get_logger(__name__)

CommandT = TypeVar("CommandT", bound=AliasedCommand)

Registry = Mapping[str, CommandT] | Iterable[tuple[str, CommandT]]


@dataclass(frozen=True)
class AliasCollision:
    """A command word matched by more than one registry entry."""

    name: str
    entries: tuple[str, ...]
    winner: str


def iter_registry_entries(registry: Registry) -> Iterator[tuple[str, CommandT]]:
    """Yield (canonical name, descriptor) pairs in insertion order."""
    if isinstance(registry, Mapping):
        yield from registry.items()
    else:
        yield from registry


def resolve_command_name(candidate: str, registry: Registry) -> str:
    """
    Resolve a command word to its canonical registered name.

    Args:
        candidate: The word the user typed
        registry: Ordered mapping (or list of pairs) of canonical name to descriptor

    Returns:
        str: The canonical name of the last matching entry, or candidate unchanged
    """
    resolved = candidate
    for name, command in iter_registry_entries(registry):
        if name == candidate or candidate in command.aliases:
            resolved = name

    if resolved != candidate:
        logger.debug("Resolved command alias", alias=candidate, command=resolved)
    return resolved


def lookup_command(candidate: str, registry: Registry) -> CommandT | None:
    """
    Resolve a command word and return the descriptor it resolves to.

    Returns:
        The descriptor registered under the resolved name, or None when the
        word matches nothing. With duplicate names the last entry is returned.
    """
    entries = list(iter_registry_entries(registry))
    resolved = resolve_command_name(candidate, entries)

    found = None
    for name, command in entries:
        if name == resolved:
            found = command
    return found


def find_alias_collisions(registry: Registry) -> list[AliasCollision]:
    """
    Find every command word that more than one registry entry answers to.

    Each collision lists the competing canonical names in insertion order and the
    one resolve_command_name() picks. Results follow first appearance of the word.
    """
    entries = list(iter_registry_entries(registry))

    claims: dict[str, list[str]] = {}
    for name, command in entries:
        for word in (name, *command.aliases):
            owners = claims.setdefault(word, [])
            if name not in owners:
                owners.append(name)

    collisions = []
    for word, owners in claims.items():
        if len(owners) > 1:
            collisions.append(
                AliasCollision(name=word, entries=tuple(owners), winner=resolve_command_name(word, entries))
            )
    return collisions
