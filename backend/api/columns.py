from dataclasses import dataclass

from litestar import Controller, get
from litestar.params import Dependency

from core.column_builder import ColumnBuilder
from core.config_base import ConfigBase
from core.localization import LocalizedHeaderSet
from core.responses import ColumnsResponse


@dataclass
class EntityTypesResponse:
    entity_types: list[str]


class ColumnsController(Controller):
    path = "/api/columns"
    tags = ["columns"]

    @get()
    async def list_entity_types(self) -> EntityTypesResponse:
        """List entity types that have a column template."""
        return EntityTypesResponse(
            entity_types=[t.value for t in ColumnBuilder.entity_types()],
        )

    @get("/{entity_type:str}")
    async def get_columns(
        self,
        entity_type: str,
        header_set: LocalizedHeaderSet,
        config_base: ConfigBase = Dependency(skip_validation=True),
    ) -> ColumnsResponse:
        """Get the grid columns for an entity type.

        Unknown entity types yield an empty column list.
        """
        builder = ColumnBuilder(config_base, header_set)
        return ColumnsResponse(
            entity_type=entity_type,
            columns=builder.create_columns(entity_type),
        )
