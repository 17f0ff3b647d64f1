"""Extension-holding base shared by every value object."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from syndikit.extensions.base import SyndicationExtension

X = TypeVar("X")


@dataclass(slots=True)
class Extensible:
    """A node that can carry at most one extension instance per extension type."""

    extensions: list[SyndicationExtension] = field(default_factory=list, kw_only=True)

    @property
    def has_extensions(self) -> bool:
        return bool(self.extensions)

    def add_extension(self, extension: SyndicationExtension) -> bool:
        """Attach ``extension`` unless an instance of its type is already present."""

        if extension is None:
            raise ValueError("Extension cannot be None")
        if self.find_extension(type(extension)) is not None:
            return False
        self.extensions.append(extension)
        return True

    def remove_extension(self, extension: SyndicationExtension) -> bool:
        if extension in self.extensions:
            self.extensions.remove(extension)
            return True
        return False

    def find_extension(self, extension_type: type[X]) -> X | None:
        for extension in self.extensions:
            if type(extension) is extension_type:
                return extension
        return None
