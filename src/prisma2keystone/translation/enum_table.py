from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from ..source import SourceEnum
from .exceptions import MissingEnumDefinitionError


class EnumTable(Mapping[str, tuple[str, ...]]):
    """
    Read-only mapping from enum name to its member names in declaration order.
    It is built once per translation run and shared by every field translation.
    """

    def __init__(self, entries: Mapping[str, Iterable[str]] | None = None):
        self._entries = MappingProxyType(
            {name: tuple(values) for name, values in (entries or {}).items()}
        )

    @classmethod
    def from_enums(cls, enums: Iterable[SourceEnum]) -> "EnumTable":
        return cls({enum.name: enum.values for enum in enums})

    def __getitem__(self, name: str) -> tuple[str, ...]:
        try:
            return self._entries[name]
        except KeyError as e:
            raise MissingEnumDefinitionError(name) from e

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"EnumTable({dict(self._entries)!r})"
