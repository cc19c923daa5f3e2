"""FastAPI application factory."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request

# Load .env file from project root (must be before other imports)
load_dotenv()
from fastapi.encoders import jsonable_encoder  # noqa: E402
from fastapi.exceptions import RequestValidationError  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402
from fastapi.responses import JSONResponse  # noqa: E402

from wbcalc.api.routes import aircraft, balance, fleet  # noqa: E402
from wbcalc.catalog.catalog import AircraftCatalog  # noqa: E402
from wbcalc.catalog.errors import CatalogError  # noqa: E402

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and load the aircraft catalog on startup.

    A catalog with an invalid envelope is a fatal data error: the app
    refuses to start rather than answer with wrong geometry.
    """
    logging.basicConfig(
        level=os.environ.get("WBCALC_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    catalog_path = os.environ.get("WBCALC_CATALOG_PATH")
    try:
        if catalog_path:
            catalog = AircraftCatalog.from_json_file(Path(catalog_path))
        else:
            catalog = AircraftCatalog.builtin()
    except CatalogError:
        logger.exception("Aircraft catalog rejected, refusing to start")
        raise

    app.state.catalog = catalog
    yield


app = FastAPI(
    title="wbcalc API",
    description="Weight & balance and CG envelope checks",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.environ.get("CORS_ORIGINS", "http://localhost:5173").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """422 without echoing the rejected input, which may be NaN or infinity."""
    errors = [{k: v for k, v in err.items() if k != "input"} for err in exc.errors()]
    return JSONResponse(status_code=422, content={"detail": jsonable_encoder(errors)})


app.include_router(aircraft.router, prefix="/api")
app.include_router(balance.router, prefix="/api")
app.include_router(fleet.router, prefix="/api")


@app.get("/api/health")
async def health():
    catalog = getattr(app.state, "catalog", None)
    return {
        "status": "ok",
        "catalog_ready": catalog is not None,
        "aircraft_count": len(catalog) if catalog is not None else 0,
    }
