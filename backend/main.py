"""SpotFinder location store: FastAPI backend."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from utils.config import DATABASE_URL, LOG_LEVEL, PORT

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logging.getLogger("location_store").setLevel(LOG_LEVEL)
from fastapi.middleware.cors import CORSMiddleware

from api.locations import router as locations_router
from api.routes import router
from location_store import close_all, open_or_create


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the location store (create or migrate the schema, seed a new table); release it on shutdown."""
    open_or_create(DATABASE_URL)
    try:
        yield
    finally:
        close_all()


app = FastAPI(
    title="SpotFinder",
    description="Address-keyed location store for the SpotFinder map client",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:8080", "http://127.0.0.1:8080"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes under /api (no static mount at / so /api is never shadowed)
app.include_router(router, prefix="/api")
app.include_router(locations_router, prefix="/api")


@app.get("/")
def root() -> dict:
    """Root redirect/info."""
    return {"service": "spotfinder", "docs": "/docs", "health": "/api/health"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=PORT)
