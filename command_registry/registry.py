"""
Command registry construction.

build_registry() turns a sequence of named descriptors into the insertion-ordered
mapping the alias resolver consults. The mapping belongs to the caller.
"""

from collections.abc import Iterable

from .config import AppConfig, get_config
from .exceptions import DuplicateCommandError, InvalidCommandError, create_error_context
from .models.command import NamedCommand
from .structured_logging.enhanced_logging_config import get_logger
from .utils.alias_resolver import find_alias_collisions

logger = get_logger(__name__)


def build_registry(commands: Iterable[NamedCommand], *, config: AppConfig | None = None) -> dict[str, NamedCommand]:
    """
    Build an ordered command registry keyed by canonical name.

    Args:
        commands: Descriptors exposing ``name`` and ``aliases``, in precedence order
        config: Application configuration; loaded with get_config() when omitted

    Returns:
        dict: Canonical name to descriptor, in the order given

    Raises:
        InvalidCommandError: If a descriptor lacks ``name`` or ``aliases``
        DuplicateCommandError: If a canonical name appears twice
    """
    if config is None:
        config = get_config()

    registry: dict[str, NamedCommand] = {}
    for position, command in enumerate(commands):
        if not isinstance(command, NamedCommand):
            raise InvalidCommandError(
                "Command descriptor must expose 'name' and 'aliases'",
                create_error_context(registry_size=len(registry), metadata={"position": position}),
                field="name" if not hasattr(command, "name") else "aliases",
                value=type(command).__name__,
            )

        name = command.name
        if name in registry:
            raise DuplicateCommandError(
                f"Command '{name}' is already registered",
                create_error_context(command=name, registry_size=len(registry)),
                command_name=name,
            )
        registry[name] = command

    if config.resolver.warn_on_alias_collisions:
        for collision in find_alias_collisions(registry):
            logger.warning(
                "Command word claimed by multiple commands; last registered wins",
                word=collision.name,
                commands=list(collision.entries),
                winner=collision.winner,
            )

    logger.debug("Command registry built", command_count=len(registry))
    return registry
