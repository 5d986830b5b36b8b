import psycopg
from litestar import Controller, get
from litestar.exceptions import NotFoundException
from litestar.params import Dependency

import core.db as db
from core.column_builder import ColumnBuilder, EntityType
from core.config_base import ConfigBase
from core.localization import LocalizedHeaderSet
from core.responses import MultiRowResponse


# ---------------------------------------------------------------------------
# SQL Queries
# ---------------------------------------------------------------------------


def sql_select_objects() -> str:
    """List all objects."""
    return """
        SELECT
            obj_num AS "ObjNum",
            name AS "Name",
            descr AS "Descr"
        FROM scada.obj
        ORDER BY obj_num
    """


def sql_select_devices() -> str:
    """List all devices."""
    return """
        SELECT
            kp_num AS "KPNum",
            name AS "Name",
            kp_type_id AS "KPTypeID",
            address AS "Address",
            call_num AS "CallNum",
            comm_line_num AS "CommLineNum",
            descr AS "Descr"
        FROM scada.kp
        ORDER BY kp_num
    """


TABLE_QUERIES = {
    EntityType.OBJECT: sql_select_objects,
    EntityType.DEVICE: sql_select_devices,
}


class TablesController(Controller):
    path = "/api/tables"
    tags = ["tables"]

    @get("/{entity_type:str}")
    async def get_table(
        self,
        entity_type: str,
        header_set: LocalizedHeaderSet,
        conn: psycopg.AsyncConnection = Dependency(skip_validation=True),
        config_base: ConfigBase = Dependency(skip_validation=True),
    ) -> MultiRowResponse:
        """Get the rows of a configuration table with their grid columns."""
        try:
            query = TABLE_QUERIES[EntityType(entity_type)]
        except ValueError:
            raise NotFoundException(detail=f"Unknown entity type: {entity_type}")

        builder = ColumnBuilder(config_base, header_set)
        return await db.select_many(
            conn,
            query(),
            columns=builder.create_columns(entity_type),
        )
