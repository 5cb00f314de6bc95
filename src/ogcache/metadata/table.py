"""Read-only mapping from content identifier to MetadataRecord."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from ogcache.errors.exceptions import ConfigurationError
from ogcache.types import MetadataRecord, Resolution

FALLBACK_IDENTIFIER = "default"


class MetadataTable:
    """Immutable metadata lookup with a designated fallback record.

    The fallback record must be present at construction time; a table
    without one is a configuration error, never a per-request one.
    """

    def __init__(
        self,
        records: Mapping[str, MetadataRecord],
        fallback_identifier: str = FALLBACK_IDENTIFIER,
    ) -> None:
        if fallback_identifier not in records:
            raise ConfigurationError(
                f"Metadata table has no fallback record '{fallback_identifier}'"
            )
        self._records: Mapping[str, MetadataRecord] = MappingProxyType(dict(records))
        self._fallback_identifier = fallback_identifier

    @property
    def fallback_identifier(self) -> str:
        return self._fallback_identifier

    @property
    def fallback_record(self) -> MetadataRecord:
        return self._records[self._fallback_identifier]

    def resolve(self, identifier: str) -> Resolution:
        """Return the identifier's record, or the fallback record if absent."""
        record = self._records.get(identifier)
        if record is not None:
            return Resolution(identifier=identifier, record=record)
        return Resolution(
            identifier=self._fallback_identifier,
            record=self.fallback_record,
            is_fallback=True,
        )

    def get(self, identifier: str) -> MetadataRecord | None:
        return self._records.get(identifier)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)
