import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blogcms import __version__
from blogcms.cache import cache
from blogcms.database import create_client, get_database
from blogcms.logging_config import setup_logging
from blogcms.middleware import TimingMiddleware
from blogcms.routers import articles, categories
from blogcms.schemas import HealthResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    setup_logging()
    client = create_client()
    app.state.mongo_client = client
    app.state.database = get_database(client)
    await cache.connect()
    logger.info("Application started")
    yield
    # Shutdown
    await cache.disconnect()
    client.close()
    logger.info("Application stopped")


app = FastAPI(
    title="Blog CMS",
    description="Articles organised into hierarchical categories, stored in MongoDB",
    version=__version__,
    lifespan=lifespan,
)

# Middleware
app.add_middleware(TimingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(articles.router)
app.include_router(categories.router)


@app.get("/health", response_model=HealthResponse)
async def health():
    cache_status = "available" if await cache.ping() else "unavailable"
    return HealthResponse(status="healthy", version=__version__, cache=cache_status)
