"""
HTTP interface exposing the scheduled movements as JSON.
"""

import logging
import time
from typing import Callable, List, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

from .endpoints.schedule import run_schedule_scraper
from .errors import PilotageError

logger = logging.getLogger(__name__)


class MovementResponse(BaseModel):
    date: str
    time: str
    maneuver: str
    berth: str
    vessel: str
    status: str


def create_app(scraper: Optional[Callable[[], list]] = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        scraper: Zero-argument callable returning MovementRecord values.
            Defaults to running the schedule scraper with environment settings.
    """
    scraper = scraper or run_schedule_scraper
    app = FastAPI(title="Pilotage Tracker")

    @app.exception_handler(PilotageError)
    async def pilotage_error_handler(request: Request, exc: PilotageError):
        logger.error(f"Error processing request {request.url.path} - {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "error": "Failed to fetch pilotage data",
                "message": str(exc),
                "kind": type(exc).__name__,
                "timestamp": int(time.time() * 1000),
                "path": request.url.path,
            },
        )

    @app.get("/movimentacoes", response_model=List[MovementResponse])
    def list_movements():
        """Fetch the schedule page and return its movements."""
        logger.info("Request received: GET /movimentacoes")
        movements = scraper()
        logger.info(f"Responding with {len(movements)} movements")
        return [movement.to_dict() for movement in movements]

    @app.get("/health", response_class=PlainTextResponse)
    def health():
        logger.debug("Health check received")
        return "OK"

    return app
