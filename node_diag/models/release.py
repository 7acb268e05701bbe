"""Release-metadata record dataclass."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class ReleaseRecord(Mapping[str, str]):
    """Key/value pairs parsed from an os-release style file.

    Keys keep file order. The record is read-only once built.
    """

    fields: Mapping[str, str] = field(default_factory=dict)
    path: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __getitem__(self, key: str) -> str:
        return self.fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    @property
    def id(self) -> str:
        return self.fields.get("ID", "")

    @property
    def version(self) -> str:
        return self.fields.get("VERSION", "")

    @property
    def version_id(self) -> str:
        return self.fields.get("VERSION_ID", "")

    @property
    def pretty_name(self) -> str:
        return self.fields.get("PRETTY_NAME", "")

    @property
    def build_id(self) -> str:
        return self.fields.get("BUILD_ID", "")
