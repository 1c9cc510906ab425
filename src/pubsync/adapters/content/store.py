"""Filesystem-backed document store for the generated publication files."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class FilesystemDocumentStore:
    """Documents are the files in ``directory`` whose suffix is ``extension``.

    Other files in the directory are neither listed nor touched. Writes go to a
    hidden temporary sibling first and are moved into place with ``os.replace``.
    """

    def __init__(self, directory: Path, *, extension: str = ".mdx") -> None:
        if not extension.startswith("."):
            raise ValueError(f"Extension must start with a dot, got {extension!r}")
        self._directory = directory
        self._extension = extension

    @property
    def directory(self) -> Path:
        return self._directory

    @property
    def extension(self) -> str:
        return self._extension

    def names(self) -> set[str]:
        self._directory.mkdir(parents=True, exist_ok=True)
        return {
            path.name
            for path in self._directory.iterdir()
            if path.is_file() and path.name.endswith(self._extension)
        }

    def read(self, name: str) -> str:
        return self._path(name).read_bytes().decode("utf-8", errors="replace")

    def write(self, name: str, content: str) -> None:
        target = self._path(name)
        temporary = target.with_name(f".{target.name}.tmp")
        try:
            temporary.write_bytes(content.encode("utf-8"))
            os.replace(temporary, target)
        except OSError:
            temporary.unlink(missing_ok=True)
            raise

    def delete(self, name: str) -> None:
        self._path(name).unlink()

    def _path(self, name: str) -> Path:
        if not name.endswith(self._extension) or "/" in name or "\\" in name:
            raise ValueError(f"Not a managed document name: {name!r}")
        return self._directory / name
