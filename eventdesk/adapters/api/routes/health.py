"""Health endpoints for the service and its persistence backend.

With the in-memory backend there is no database to probe: the store lives in
the process, so it is reported as connected whenever the app answers.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from eventdesk.adapters.api.schemas import DatabaseHealthResponse, DatabaseTestResponse, HealthResponse
from eventdesk.core.config.settings import settings
from eventdesk.core.exceptions import DatabaseError
from eventdesk.core.handlers import error_body
from eventdesk.core.logging import logger
from eventdesk.infrastructure.database import check_database_health, run_probe_query
from eventdesk.infrastructure.dependency_injection.dependencies import DBSession, MemoryStore
from eventdesk.utils.i18n import get_translated_message

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """Liveness probe; does not touch the database."""
    return HealthResponse(
        status="ok",
        env=settings.APP_ENV,
        message=get_translated_message("health_status_ok", request.state.language),
        timestamp=datetime.now(timezone.utc),
    )


@router.get(
    "/db-health",
    response_model=DatabaseHealthResponse,
    responses={503: {"description": "Database unreachable"}},
)
async def database_health(request: Request, store: MemoryStore):
    if store is not None:
        return DatabaseHealthResponse(database="connected", backend="memory")
    if await check_database_health():
        return DatabaseHealthResponse(database="connected", backend="sql")
    return JSONResponse(
        status_code=503,
        content={
            **error_body(get_translated_message("database_unavailable", request.state.language)),
            "database": "disconnected",
            "backend": "sql",
        },
    )


@router.get("/db-test", response_model=DatabaseTestResponse)
async def database_test(request: Request, session: DBSession):
    """Runs ``SELECT 1`` against the SQL backend and reports the result."""
    message = get_translated_message("database_test_ok", request.state.language)
    if session is None:
        return DatabaseTestResponse(message=message, result=1, backend="memory")
    try:
        result = await run_probe_query(session)
    except SQLAlchemyError as e:
        logger.error("database_test_failed", error=str(e))
        raise DatabaseError("Database test query failed") from e
    return DatabaseTestResponse(message=message, result=result, backend="sql")
