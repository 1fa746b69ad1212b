"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import router
from .config import get_settings
from . import __version__

# Configure logging
logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - handles startup and shutdown."""
    logger.info("Starting ChemSnap Label Extraction API...")
    logger.info(f"API ready - Version {__version__}")
    
    yield
    
    logger.info("Shutting down ChemSnap Label Extraction API...")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()
    
    app = FastAPI(
        title=settings.app_name,
        description="""
## Chemical Label Field Extraction API

Turns OCR text from a photographed chemical container label into suggestions
for an inventory record.

### Features
- **Suggestions**: Ranked chemical name, manufacturer, volume and unit candidates
- **Parsing**: CAS registry numbers and expiration dates (ISO output)
- **Tap to assign**: Route a single OCR line into a field
- **Conflict handling**: Replace / Append / Cancel when a field already has a value

### Quick Start
1. Use `/health` to check API status
2. Send recognized text to `/suggestions`
3. Use `/assign` to write the chosen candidate into your record
        """,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    
    # Include routes
    app.include_router(router, prefix="/api/v1")
    
    # Root redirect to docs
    @app.get("/", include_in_schema=False)
    async def root():
        return {
            "message": "ChemSnap Label Extraction API",
            "version": __version__,
            "docs": "/docs"
        }
    
    return app


# Create app instance
app = create_app()
