"""Download-count projections — read-only reporting records.

A projection names its storage table and maps one row to a typed record
with an explicit per-column extraction. Lookups go through any object
satisfying :class:`RowSource`, so this module never touches the database
itself.

``counted`` is the part of ``downloads`` already folded into aggregate
totals; storage is expected to keep ``counted <= downloads``. It is
internal bookkeeping and is not part of the external form.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Annotated, Any, ClassVar, Protocol, Self

from pydantic import BaseModel, Field, ValidationError

from crateguard.domain.errors import NotFound, RowMappingError

Int32 = Annotated[int, Field(ge=-(2**31), le=2**31 - 1)]

_TIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class RowSource(Protocol):
    """Storage collaborator answering a single lookup-by-identifier."""

    def fetch_row(self, table_name: str, row_id: int) -> Mapping[str, Any] | None: ...


def encode_time(ts: datetime) -> str:
    """Render a timestamp as RFC 3339 UTC with second precision.

    Naive datetimes are taken to be UTC already.

    Examples:
        >>> encode_time(datetime(2014, 11, 25, 23, 16, 13))
        '2014-11-25T23:16:13Z'
    """
    if ts.tzinfo is not None:
        ts = ts.astimezone(UTC)
    return ts.strftime(_TIME_FORMAT)


def column(row: Mapping[str, Any], name: str, kind: type) -> Any:
    """Extract column *name* from *row*, requiring a value of type *kind*.

    Raises:
        RowMappingError: If the column is missing or holds another type.
    """
    if name not in row:
        msg = f"row is missing column {name!r}"
        raise RowMappingError(msg, value=name)
    value = row[name]
    # bool is an int subclass; a boolean is never a counter or an id.
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        msg = f"column {name!r} expected {kind.__name__}, found {type(value).__name__}"
        raise RowMappingError(msg, value=value)
    return value


class Projection(BaseModel):
    """Base for records mapped from a single storage row."""

    model_config = {"frozen": True}

    table_name: ClassVar[str] = ""

    @classmethod
    @abstractmethod
    def from_row(cls, row: Mapping[str, Any]) -> Self:
        """Map one storage row to a record, raising :class:`RowMappingError` on a bad shape."""

    @classmethod
    def _build(cls, **fields: Any) -> Self:
        try:
            return cls(**fields)
        except ValidationError as exc:
            first = exc.errors(include_url=False)[0]
            msg = f"column {first['loc'][0]!r} is out of range: {first['msg']}"
            raise RowMappingError(msg, value=first.get("input")) from exc

    @classmethod
    def find(cls, source: RowSource, row_id: int) -> Self:
        """Look up one record by identifier.

        Raises:
            NotFound: If no row has *row_id*.
            RowMappingError: If the row does not have the expected shape.
        """
        row = source.fetch_row(cls.table_name, row_id)
        if row is None:
            raise NotFound(cls.table_name, row_id)
        return cls.from_row(row)


class EncodableVersionDownload(BaseModel):
    """External form of a :class:`VersionDownload`."""

    model_config = {"frozen": True}

    id: Int32
    version: Int32
    downloads: Int32
    date: str


class VersionDownload(Projection):
    """Daily download count of one version."""

    table_name: ClassVar[str] = "version_downloads"

    id: Int32
    version_id: Int32
    downloads: Int32
    counted: Int32
    date: datetime

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> VersionDownload:
        return cls._build(
            id=column(row, "id", int),
            version_id=column(row, "version_id", int),
            downloads=column(row, "downloads", int),
            counted=column(row, "counted", int),
            date=column(row, "date", datetime),
        )

    def to_external(self) -> EncodableVersionDownload:
        return EncodableVersionDownload(
            id=self.id,
            version=self.version_id,
            downloads=self.downloads,
            date=encode_time(self.date),
        )


class CrateDownload(Projection):
    """Daily download count of one package, across all its versions."""

    table_name: ClassVar[str] = "crate_downloads"

    id: Int32
    crate_id: Int32
    downloads: Int32
    date: datetime

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> CrateDownload:
        return cls._build(
            id=column(row, "id", int),
            crate_id=column(row, "crate_id", int),
            downloads=column(row, "downloads", int),
            date=column(row, "date", datetime),
        )
