"""Command descriptor models."""

from .command import AliasedCommand, CommandDescriptor, NamedCommand

__all__ = ["AliasedCommand", "CommandDescriptor", "NamedCommand"]
