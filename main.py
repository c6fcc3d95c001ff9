import traceback

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from core.exceptions import RosterException

from db import Base, engine
from core.config import settings
from core.logging import logger

from models.team import Team  # noqa: F401
from models.player import Player  # noqa: F401
from models.game import Game  # noqa: F401
from models.roster import RosterEntry  # noqa: F401
from models.availability import PlayerAvailability  # noqa: F401

# ROUTES
from api.routers.teams import router as teams_router
from api.routers.players import router as players_router
from api.routers.games import router as games_router
from api.routers.rosters import router as rosters_router
from api.routers.availability import router as availability_router


app = FastAPI(title="Netball Roster API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RosterException)
async def roster_exception_handler(request: Request, exc: RosterException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "type": "roster_error"}
    )


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    return JSONResponse(
        status_code=400,
        content={"detail": str(exc), "type": "validation_error"}
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    error_traceback = ''.join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {error_traceback}")
    content = {"detail": str(exc), "type": type(exc).__name__}
    if settings.debug:
        content["traceback"] = error_traceback
    return JSONResponse(status_code=500, content=content)


@app.on_event("startup")
async def startup_event():
    logger.info(f"Roster API starting on {engine.url.render_as_string(hide_password=True)}")
    # Alembic owns the schema in production; this only fills gaps for local SQLite runs
    Base.metadata.create_all(bind=engine)
    logger.info(f"Tables ready: {', '.join(sorted(Base.metadata.tables))}")


@app.on_event("shutdown")
async def shutdown_event():
    engine.dispose()
    logger.info("Roster API stopped, connection pool released")


@app.get("/health", tags=["Health"])
async def health():
    return {"status": "ok"}


app.include_router(teams_router)
app.include_router(players_router)
app.include_router(games_router)
app.include_router(rosters_router)
app.include_router(availability_router)
