"""
Seat Booking - FastAPI Application

Serves one venue grid per process. Bookings survive restarts through the
configured booked seats store.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config import di
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger
from src.platform.state.kvrocks_client import kvrocks_client


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info(f'🚀 [Seat Booking] Starting up with {settings.BOOKING_STORE_BACKEND} store')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Seat Booking] Dependency injection wired')

    # Reconcile the grid with persisted bookings before the first request
    di.setup()
    Logger.base.info('✅ [Seat Booking] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Seat Booking] Shutting down...')
    if settings.BOOKING_STORE_BACKEND == 'kvrocks':
        kvrocks_client.disconnect()
    container.unwire()
    di.cleanup()
    Logger.base.info('👋 [Seat Booking] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')


if __name__ == '__main__':
    import uvicorn

    uvicorn.run('src.main:app', host='0.0.0.0', port=8000)
