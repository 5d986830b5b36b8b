from dataclasses import dataclass, field
from typing import Any, Literal


ColumnKind = Literal["plain", "reference"]


@dataclass
class ReferenceEntry:
    """One selectable value of a reference column."""

    value: Any
    display: Any


@dataclass
class ColumnDescriptor:
    """Schema entry for one column of a grid control."""

    name: str
    header: str
    kind: ColumnKind
    data_field: str
    value_field: str | None = None
    display_field: str | None = None
    source: list[ReferenceEntry] | None = None


@dataclass
class ColumnsResponse:
    """Column schema for one entity type."""

    entity_type: str
    columns: list[ColumnDescriptor] = field(default_factory=list)


@dataclass
class MultiRowResponse:
    """Response containing multiple rows with column metadata."""

    columns: list[ColumnDescriptor]
    data: list[dict[str, Any]]
