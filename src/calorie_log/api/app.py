"""FastAPI application factory."""

import logging

from fastapi import APIRouter, FastAPI, Query, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse

from calorie_log.api.schemas import CreateEntryRequest
from calorie_log.api.ui import render_index
from calorie_log.app_logging import configure_logging
from calorie_log.config import normalize_api_prefix
from calorie_log.containers import AppContainer
from calorie_log.domain.entries import DailyEntries, Entry
from calorie_log.services.errors import EntryError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)
    api_prefix = normalize_api_prefix(container.settings.api_prefix)

    app = FastAPI(title="Calorie Log")
    app.state.container = container

    @app.exception_handler(EntryError)
    async def entry_error_handler(_request: Request, exc: EntryError) -> JSONResponse:
        return JSONResponse({"error": exc.message}, status_code=exc.http_status)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info("Rejected request to %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            {"error": "Invalid request body"},
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    router = APIRouter(prefix=api_prefix, tags=["entries"])

    @router.get("/entries")
    def list_entries(
        request: Request, date: str | None = Query(default=None)
    ) -> dict[str, object]:
        """Return the entries logged on a date and their calorie total."""
        state_container: AppContainer = request.app.state.container
        daily = state_container.entry_service.list_entries(date)
        return _format_daily(daily)

    @router.post("/entries", status_code=status.HTTP_201_CREATED)
    def create_entry(
        payload: CreateEntryRequest, request: Request
    ) -> dict[str, object]:
        """Log a new entry, estimating calories when none are supplied."""
        state_container: AppContainer = request.app.state.container
        entry = state_container.entry_service.create_entry(
            name=payload.name,
            date=payload.date,
            calories=payload.calories,
            category=payload.category,
        )
        return _format_entry(entry)

    @router.delete("/entries")
    def delete_entry(
        request: Request, entry_id: str | None = Query(default=None, alias="id")
    ) -> dict[str, bool]:
        """Delete an entry by id."""
        state_container: AppContainer = request.app.state.container
        state_container.entry_service.delete_entry(entry_id)
        return {"success": True}

    @router.get("/entries/estimate")
    def estimate_entry(
        request: Request,
        name: str | None = Query(default=None),
        category: str | None = Query(default=None),
    ) -> dict[str, object]:
        """Preview the calorie estimate for a food name."""
        state_container: AppContainer = request.app.state.container
        calories = state_container.entry_service.estimate(name, category)
        return {"name": name, "category": category, "calories": calories}

    app.include_router(router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse)
    async def index() -> HTMLResponse:
        """Single page client for the entries API."""
        return HTMLResponse(render_index(api_prefix))

    return app


def _format_entry(entry: Entry) -> dict[str, object]:
    return {
        "id": entry.id,
        "name": entry.name,
        "calories": entry.calories,
        "category": entry.category,
        "date": entry.date,
        "createdAt": entry.created_at.isoformat(),
    }


def _format_daily(daily: DailyEntries) -> dict[str, object]:
    return {
        "entries": [_format_entry(entry) for entry in daily.entries],
        "totalCalories": daily.total_calories,
    }
