from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator

from litestar import Litestar
from litestar.di import Provide
from litestar.logging.config import LoggingConfig

from core.config import AppConfig
from core.config_base import provide_config_base
from core.db import init_pool, close_pool, provide_connection
from core.localization import LocalizedHeaderSet
from api.columns import ColumnsController
from api.health import HealthController, PingController
from api.tables import TablesController


config: AppConfig | None = None


async def provide_header_set() -> LocalizedHeaderSet:
    """Litestar dependency provider for the configured header phrases."""
    if config is None:
        return LocalizedHeaderSet()
    return config.header_set


@asynccontextmanager
async def lifespan(app: Litestar) -> AsyncGenerator[None, None]:
    global config
    config = AppConfig.load()
    print(f"Config loaded: database={config.database.host}")
    print(f"Header phrases loaded for {config.header_set.table_count()} table(s)")

    if config.database.host:
        await init_pool(config.database.conninfo)
        print("Database pool initialized")

    yield

    await close_pool()
    print("Database pool closed")


app = Litestar(
    route_handlers=[
        HealthController,
        PingController,
        ColumnsController,
        TablesController,
    ],
    dependencies={
        "conn": Provide(provide_connection),
        "config_base": Provide(provide_config_base),
        "header_set": Provide(provide_header_set),
    },
    logging_config=LoggingConfig(log_exceptions="always"),
    lifespan=[lifespan],
)
