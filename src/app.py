"""
Customer Directory Backend API Server
Customer groups, their units and contact persons over PostgreSQL
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import ALLOWED_ORIGINS, API_PREFIX, MAX_BODY_BYTES
from database.connection import init_database, close_database
from api.routes import health, groups, units, persons
from middleware.body_limit import BodySizeLimitMiddleware
from utils.error_handling import setup_error_handling

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    await init_database()
    yield
    await close_database()

# FastAPI app initialization
app = FastAPI(
    title="Customer Directory Backend",
    description="CRUD API for customer groups, their units and contact persons",
    version="1.0.0",
    lifespan=lifespan
)

# Body size limit (declared lengths checked before routing, streamed bodies counted while read)
app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=MAX_BODY_BYTES)

# Setup centralized error handling
setup_error_handling(app)

# CORS middleware (outermost user middleware; unhandled-exception 500s are
# rendered by the server error layer outside it and carry no CORS headers)
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

# Include API routes
app.include_router(health.router, tags=["Health"])
app.include_router(groups.router, prefix=f"{API_PREFIX}/api/groups", tags=["Groups"])
app.include_router(units.router, prefix=f"{API_PREFIX}/api/units", tags=["Units"])
app.include_router(persons.router, prefix=f"{API_PREFIX}/api/persons", tags=["Persons"])

logger.info(f"Routes mounted under '{API_PREFIX or '/'}'")

# FastAPI app instance is exported for use by uvicorn
# Server startup is handled by main.py at the project root
