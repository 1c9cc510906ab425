"""Ports for persisting rendered publication documents."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DocumentStore(Protocol):
    """A flat collection of named text documents sharing one managed extension.

    ``names`` only lists documents carrying ``extension``; anything else living
    next to them is outside the store's concern.
    """

    @property
    def extension(self) -> str: ...

    def names(self) -> set[str]: ...

    def read(self, name: str) -> str: ...

    def write(self, name: str, content: str) -> None: ...

    def delete(self, name: str) -> None: ...


__all__ = ["DocumentStore"]
