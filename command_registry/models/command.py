"""
Command descriptor models.

A command descriptor is anything exposing an ordered collection of alias
strings. AliasedCommand states that contract structurally, so plain objects,
command classes with a class-level ``aliases`` attribute and the pydantic
CommandDescriptor below all qualify.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


@runtime_checkable
class AliasedCommand(Protocol):
    """Structural contract for anything the alias resolver can consult."""

    aliases: Sequence[str]


@runtime_checkable
class NamedCommand(AliasedCommand, Protocol):
    """A descriptor that also knows its own canonical name."""

    name: str


class CommandDescriptor(BaseModel):
    """
    Concrete command descriptor.

    Aliases are kept exactly as given: order is preserved and duplicates are allowed.
    """

    model_config = ConfigDict(
        # Security: reject unknown fields to prevent injection
        extra="forbid",
        validate_assignment=True,
    )

    name: str = Field(..., min_length=1, description="Canonical command name")
    aliases: list[str] = Field(default_factory=list, description="Alternate names accepted for this command")
    description: str | None = Field(default=None, description="Short help text")

    def __repr__(self) -> str:
        return f"<CommandDescriptor(name={self.name}, aliases={self.aliases})>"
