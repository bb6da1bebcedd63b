from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy import text

from game_catalog.config import settings
from game_catalog.db.session import shutdown
from game_catalog.dependencies import DB
from game_catalog.exceptions import DomainError, DuplicateGameError, GameNotFoundError
from game_catalog.logging import get_logger
from game_catalog.middleware import FaultBoundaryMiddleware, RequestIDMiddleware
from game_catalog.routers.game import router as game_router
from game_catalog.schemas.error import ErrorDetail, ErrorResponse
from game_catalog.validation import field_violations, validation_body

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Code before yield runs on startup, after yield on shutdown (closes the pool)."""
    yield
    await shutdown()


app = FastAPI(title="Catálogo de Jogos", lifespan=lifespan)
# Last added runs outermost: RequestID wraps the fault boundary, which wraps routing.
app.add_middleware(FaultBoundaryMiddleware)
app.add_middleware(RequestIDMiddleware)
app.include_router(game_router, prefix=settings.api_prefix)


def _error_json(code: str, message: str) -> dict[str, object]:
    """Build the standard error envelope as a dict for JSONResponse."""
    return ErrorResponse(error=ErrorDetail(code=code, message=message)).model_dump()


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Return 400 with one entry per rejected field. The service is never reached."""
    violations = field_violations(exc.errors())
    logger.info(
        "request_validation_failed",
        path=request.url.path,
        fields=[violation.field for violation in violations],
    )
    return JSONResponse(status_code=400, content=validation_body(violations))


@app.exception_handler(GameNotFoundError)
async def game_not_found_handler(request: Request, exc: GameNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content=exc.message)


@app.exception_handler(DuplicateGameError)
async def duplicate_game_handler(request: Request, exc: DuplicateGameError) -> JSONResponse:
    return JSONResponse(status_code=422, content=exc.message)


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Return 400 for generic domain-level violations."""
    logger.warning("domain_error", error=exc.message, path=request.url.path)
    return JSONResponse(status_code=400, content=_error_json("domain_error", exc.message))


@app.get("/health")
async def health(db: DB) -> dict[str, str]:
    """Health check: 200 only if the database answers a ping query."""
    await db.execute(text("SELECT 1"))
    return {"status": "ok"}
