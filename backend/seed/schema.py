"""DDL for the configuration database tables."""

SCHEMA_STATEMENTS = [
    "CREATE SCHEMA IF NOT EXISTS scada",
    """
    CREATE TABLE IF NOT EXISTS scada.kp_type (
        kp_type_id      INT PRIMARY KEY,
        name            TEXT NOT NULL,
        dll_file_name   TEXT,
        descr           TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS scada.comm_line (
        comm_line_num   INT PRIMARY KEY,
        name            TEXT NOT NULL,
        descr           TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS scada.obj (
        obj_num         INT PRIMARY KEY,
        name            TEXT NOT NULL,
        descr           TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS scada.kp (
        kp_num          INT PRIMARY KEY,
        name            TEXT NOT NULL,
        kp_type_id      INT NOT NULL REFERENCES scada.kp_type (kp_type_id),
        address         INT,
        call_num        TEXT,
        comm_line_num   INT REFERENCES scada.comm_line (comm_line_num),
        descr           TEXT
    )
    """,
]


async def create_schema(conn) -> None:
    """Create the scada schema and its tables if they do not exist."""
    async with conn.cursor() as cur:
        for statement in SCHEMA_STATEMENTS:
            await cur.execute(statement)
    print("Schema scada is ready")
