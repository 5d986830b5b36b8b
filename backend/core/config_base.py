"""Snapshot of the configuration database tables that columns refer to."""

from dataclasses import dataclass, field
from typing import Any

import psycopg
import psycopg.rows


# ---------------------------------------------------------------------------
# SQL Queries
# ---------------------------------------------------------------------------


def sql_select_device_types() -> str:
    """List all device types."""
    return """
        SELECT
            kp_type_id AS "KPTypeID",
            name AS "Name",
            dll_file_name AS "DllFileName",
            descr AS "Descr"
        FROM scada.kp_type
        ORDER BY kp_type_id
    """


def sql_select_comm_lines() -> str:
    """List all communication lines."""
    return """
        SELECT
            comm_line_num AS "CommLineNum",
            name AS "Name",
            descr AS "Descr"
        FROM scada.comm_line
        ORDER BY comm_line_num
    """


@dataclass
class ConfigBase:
    """Referenceable tables of the configuration database.

    Rows are plain mappings keyed by configuration field name.
    """

    device_types: list[dict[str, Any]] = field(default_factory=list)
    comm_lines: list[dict[str, Any]] = field(default_factory=list)


async def load_config_base(conn: psycopg.AsyncConnection) -> ConfigBase:
    """Read the current contents of the referenceable tables."""
    async with conn.cursor(row_factory=psycopg.rows.dict_row) as cur:
        await cur.execute(sql_select_device_types())
        device_types = [dict(row) for row in await cur.fetchall()]

        await cur.execute(sql_select_comm_lines())
        comm_lines = [dict(row) for row in await cur.fetchall()]

    return ConfigBase(device_types=device_types, comm_lines=comm_lines)


async def provide_config_base(conn: psycopg.AsyncConnection) -> ConfigBase:
    """Litestar dependency provider for a fresh configuration snapshot."""
    return await load_config_base(conn)
