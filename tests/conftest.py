"""Shared fixtures for the column schema tests."""

import pytest

from core.config_base import ConfigBase
from core.localization import LocalizedHeaderSet


@pytest.fixture
def config_base():
    """Configuration snapshot with a few device types and lines."""
    return ConfigBase(
        device_types=[
            {"KPTypeID": 2, "Name": "Modbus", "DllFileName": "KpModbus.dll", "Descr": None},
            {"KPTypeID": 1, "Name": "Simulator", "DllFileName": "KpSim.dll", "Descr": None},
            {"KPTypeID": 3, "Name": "OPC", "DllFileName": "KpOpc.dll", "Descr": None},
        ],
        comm_lines=[
            {"CommLineNum": 1, "Name": "Line B", "Descr": None},
            {"CommLineNum": 2, "Name": "Line A", "Descr": None},
        ],
    )


@pytest.fixture
def headers():
    return LocalizedHeaderSet({"Device": {"Address": "Адрес"}})


class FakeCursor:
    """Async cursor that answers queries from canned rows."""

    def __init__(self, results):
        self.results = results
        self.executed = []
        self._rows = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False

    async def execute(self, query, params=None):
        self.executed.append((query, params))
        self._rows = []
        for marker, rows in self.results.items():
            if marker in query:
                self._rows = rows
                break

    async def fetchall(self):
        return list(self._rows)

    async def fetchone(self):
        return self._rows[0] if self._rows else None


class FakeConnection:
    """Stand-in for psycopg.AsyncConnection.

    results maps a substring of the query (e.g. a table name) to the rows
    returned for it.
    """

    def __init__(self, results=None):
        self.cursors = []
        self.results = results or {}

    def cursor(self, row_factory=None):
        cur = FakeCursor(self.results)
        self.cursors.append(cur)
        return cur
