import asyncio

from conftest import FakeConnection

from seed.config_tables import SEED_TABLES, seed_config_tables, sql_insert_row
from seed.schema import SCHEMA_STATEMENTS, create_schema


class TestSeedData:

    def test_insert_sql(self):
        sql = sql_insert_row("scada.obj", ["obj_num", "name"])
        assert sql == "INSERT INTO scada.obj (obj_num, name) VALUES (%(obj_num)s, %(name)s)"

    def test_keys_unique_per_table(self):
        for table, key, rows in SEED_TABLES:
            keys = [row[key] for row in rows]
            assert len(keys) == len(set(keys)), table

    def test_devices_reference_seeded_rows(self):
        tables = {table: rows for table, _, rows in SEED_TABLES}
        type_ids = {r["kp_type_id"] for r in tables["scada.kp_type"]}
        line_nums = {r["comm_line_num"] for r in tables["scada.comm_line"]}
        for device in tables["scada.kp"]:
            assert device["kp_type_id"] in type_ids
            assert device["comm_line_num"] is None or device["comm_line_num"] in line_nums

    def test_seed_inserts_missing_rows(self, capsys):
        conn = FakeConnection()
        asyncio.run(seed_config_tables(conn))
        inserts = [q for q, _ in conn.cursors[0].executed if q.startswith("INSERT")]
        assert len(inserts) == sum(len(rows) for _, _, rows in SEED_TABLES)
        assert "Created scada.kp row" in capsys.readouterr().out


class TestSchema:

    def test_creates_every_table(self):
        conn = FakeConnection()
        asyncio.run(create_schema(conn))
        executed = [q for q, _ in conn.cursors[0].executed]
        assert executed == SCHEMA_STATEMENTS
        for table in ("kp_type", "comm_line", "obj", "kp"):
            assert any(f"scada.{table} (" in q for q in executed)
