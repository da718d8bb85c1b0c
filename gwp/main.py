# gwp/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI

from gwp.api.premiums import router as premiums_router
from gwp.config import Config
from gwp.data.loader import load
from gwp.data.schema import Table
from gwp.data.store import get_table
from gwp.logging_config import configure_logging
from gwp.models.premiums import HealthOut

logger = logging.getLogger(__name__)


def create_app(data_file: Optional[str] = None) -> FastAPI:
    data_file = data_file or Config.DATA_FILE

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # raises LoadError on an unreadable dataset
        app.state.table = load(data_file)
        yield

    app = FastAPI(
        title="GWP Averages API",
        version="0.1.0",
        lifespan=lifespan,
    )

    @app.get("/health", response_model=HealthOut)
    def health_check(table: Table = Depends(get_table)) -> HealthOut:
        return HealthOut(status="ok", records=len(table))

    app.include_router(premiums_router)

    return app


configure_logging()
app = create_app()
