"""Seed data for the configuration database tables."""

SAMPLE_DEVICE_TYPES = [
    {"kp_type_id": 1, "name": "Simulator", "dll_file_name": "KpSim.dll", "descr": "Data simulator"},
    {"kp_type_id": 2, "name": "Modbus", "dll_file_name": "KpModbus.dll", "descr": "Modbus RTU/TCP device"},
    {"kp_type_id": 3, "name": "OPC", "dll_file_name": "KpOpc.dll", "descr": "OPC DA client"},
]

SAMPLE_COMM_LINES = [
    {"comm_line_num": 1, "name": "Line B", "descr": "Serial line COM1"},
    {"comm_line_num": 2, "name": "Line A", "descr": "Ethernet segment"},
]

SAMPLE_OBJECTS = [
    {"obj_num": 1, "name": "Pump station", "descr": None},
    {"obj_num": 2, "name": "Boiler house", "descr": "Main heating plant"},
]

SAMPLE_DEVICES = [
    {
        "kp_num": 1,
        "name": "Simulator",
        "kp_type_id": 1,
        "address": None,
        "call_num": None,
        "comm_line_num": None,
        "descr": None,
    },
    {
        "kp_num": 2,
        "name": "Pump controller",
        "kp_type_id": 2,
        "address": 1,
        "call_num": None,
        "comm_line_num": 1,
        "descr": "Pump station PLC",
    },
    {
        "kp_num": 3,
        "name": "Boiler OPC",
        "kp_type_id": 3,
        "address": None,
        "call_num": "opcda://boiler/Server.1",
        "comm_line_num": 2,
        "descr": None,
    },
]

# (table, key column, rows) in foreign key order
SEED_TABLES = [
    ("scada.kp_type", "kp_type_id", SAMPLE_DEVICE_TYPES),
    ("scada.comm_line", "comm_line_num", SAMPLE_COMM_LINES),
    ("scada.obj", "obj_num", SAMPLE_OBJECTS),
    ("scada.kp", "kp_num", SAMPLE_DEVICES),
]


def sql_insert_row(table: str, fields: list[str]) -> str:
    """Insert a single row into a configuration table."""
    names = ", ".join(fields)
    values = ", ".join(f"%({f})s" for f in fields)
    return f"INSERT INTO {table} ({names}) VALUES ({values})"


async def seed_config_tables(conn) -> None:
    """Insert sample configuration rows that are not present yet."""
    async with conn.cursor() as cur:
        for table, key, rows in SEED_TABLES:
            for row in rows:
                await cur.execute(
                    f"SELECT 1 FROM {table} WHERE {key} = %(key)s",
                    {"key": row[key]},
                )
                if await cur.fetchone():
                    print(f"Row already exists: {table} {row[key]}")
                    continue

                await cur.execute(sql_insert_row(table, list(row)), row)
                print(f"Created {table} row: {row[key]} {row['name']}")


async def clear_config_tables(conn) -> None:
    """Remove the sample configuration rows."""
    async with conn.cursor() as cur:
        for table, key, rows in reversed(SEED_TABLES):
            keys = [row[key] for row in rows]
            await cur.execute(
                f"DELETE FROM {table} WHERE {key} = ANY(%(keys)s)",
                {"keys": keys},
            )
            print(f"Deleted {cur.rowcount} row(s) from {table}")
