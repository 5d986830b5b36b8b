from core.responses import ColumnDescriptor, ReferenceEntry


def plain_column(name: str) -> ColumnDescriptor:
    """Create a free-text column bound to the field of the same name."""
    return ColumnDescriptor(
        name=name,
        header=name,
        kind="plain",
        data_field=name,
    )


def reference_column(
    name: str,
    value_field: str,
    display_field: str,
    source: list[ReferenceEntry],
) -> ColumnDescriptor:
    """Create a column whose values are picked from a lookup source.

    The source is taken as is; an empty source gives a column with
    nothing to select.
    """
    return ColumnDescriptor(
        name=name,
        header=name,
        kind="reference",
        data_field=name,
        value_field=value_field,
        display_field=display_field,
        source=source,
    )
