"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown wiring (logging, SQL instrumentation,
telemetry flush, DB engine dispose); no business logic here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from assignment_hub.infrastructure.persistence import database
from assignment_hub.shared.telemetry import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Tracing itself is configured in create_app() (middleware must be added
    before the app starts); here the engine is instrumented once it exists.
    """
    setup_logging()

    telemetry = getattr(app.state, "telemetry", None)
    if telemetry is not None:
        database._ensure_engine()
        if database.engine is not None:
            telemetry.instrument_sqlalchemy(database.engine)
            logger.info("SQLAlchemy instrumentation enabled")

    yield

    if telemetry is not None:
        telemetry.shutdown()
        logger.info("Telemetry shutdown complete")

    await database.dispose_engine()
