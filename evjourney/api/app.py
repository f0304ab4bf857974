"""
FastAPI application factory.

* Registers routes for stations, vehicles, charging, route planning and admin.
* Starts / stops the station status listener via lifespan events.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from evjourney.api.middleware import limiter
from evjourney.api.routes import admin, charging, planning, stations, vehicles
from evjourney.workers import station_feed as _feed

logging.basicConfig(level=logging.INFO)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Start the station feed listener on startup; stop on shutdown."""
    await _feed.start_feed_listener()
    yield
    await _feed.stop_feed_listener()


def create_app() -> FastAPI:
    app = FastAPI(
        title="UAE EV Journey Planner API",
        description=(
            "Vehicle and charging-station catalogs for the UAE, charging-time "
            "estimates, and mock trip plans with ranked charging stops.  "
            "Station availability is kept current from a pub/sub feed."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Routers
    app.include_router(stations.router, prefix="/api/v1")
    app.include_router(vehicles.router, prefix="/api/v1")
    app.include_router(charging.router, prefix="/api/v1")
    app.include_router(planning.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app
