"""Translated column headers."""

from collections.abc import Mapping

from core.responses import ColumnDescriptor


class LocalizedHeaderSet:
    """Header phrases keyed by table identifier, then by field name."""

    def __init__(self, tables: Mapping[str, Mapping[str, str]] | None = None):
        self._tables: dict[str, dict[str, str]] = {
            table_id: dict(phrases) for table_id, phrases in (tables or {}).items()
        }

    def phrases(self, table_id: str) -> Mapping[str, str] | None:
        """Return the phrase table for table_id, or None if there is none."""
        return self._tables.get(table_id)

    def table_count(self) -> int:
        return len(self._tables)


def translate_headers(
    table_id: str,
    columns: list[ColumnDescriptor],
    headers: LocalizedHeaderSet | None,
) -> list[ColumnDescriptor]:
    """Replace column headers with translated phrases where available.

    Headers are changed in place. Columns without a phrase keep their
    default header.
    """
    if headers is None:
        return columns

    phrases = headers.phrases(table_id)
    if phrases is None:
        return columns

    for column in columns:
        header = phrases.get(column.name)
        if header is not None:
            column.header = header

    return columns
