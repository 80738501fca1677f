"""REST API exposing the shul board."""

from typing import Any, Dict
import logging

from fastapi import FastAPI, HTTPException

from ..board import ShulBoard
from ..core.errors import ScheduleComputationError

logger = logging.getLogger(__name__)


class ZmanimRestAPI:
    """REST API over a ShulBoard."""

    def __init__(self, board: ShulBoard):
        """Initialize REST API.

        Args:
            board: Board that computes the display slots
        """
        self.board = board
        self.app = FastAPI(
            title="Shul Zmanim API",
            description="Mincha/Maariv times and weekly parsha for the shul board",
            version="1.0.0",
        )

        # Setup routes
        self._setup_routes()

    def _setup_routes(self) -> None:
        """Setup all API routes."""

        @self.app.get("/api/board")
        async def get_board() -> Dict[str, str]:
            """All display slots, freshly computed."""
            return await self.board.refresh()

        @self.app.get("/api/zmanim/weekday")
        async def get_weekday():
            """Weekday Mincha/Maariv schedule."""
            try:
                schedule = self.board.weekday_schedule()
            except ScheduleComputationError as e:
                logger.error(f"Weekday schedule unavailable: {e}")
                raise HTTPException(status_code=503, detail=str(e))
            return schedule.model_dump(mode="json")

        @self.app.get("/api/zmanim/shabbos")
        async def get_shabbos():
            """Coming Shabbos schedule."""
            try:
                schedule = self.board.shabbos_schedule()
            except ScheduleComputationError as e:
                logger.error(f"Shabbos schedule unavailable: {e}")
                raise HTTPException(status_code=503, detail=str(e))
            return schedule.model_dump(mode="json")

        @self.app.get("/api/calibration")
        async def get_calibration() -> Dict[str, Any]:
            """Session calibration."""
            return self.board.calibration_info()

        @self.app.get("/health")
        async def health_check():
            """Health check endpoint."""
            return {
                "status": "healthy",
                "site": self.board.site.name,
                "timestamp": self.board.now().isoformat(),
            }

    def get_app(self) -> FastAPI:
        """Get the FastAPI app instance."""
        return self.app


def create_app() -> FastAPI:
    """App factory for uvicorn."""
    return ZmanimRestAPI(ShulBoard()).get_app()
