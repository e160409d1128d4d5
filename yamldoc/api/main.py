"""yamldoc API - annotated documentation for YAML data.

This API renders data trees (typically default configuration values) as
readable listings, with comments taken from description trees:
- Ad-hoc rendering of YAML sent in the request
- Rendering against stored description sets
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from yamldoc import __version__
from yamldoc.api.routes import descriptions, document
from yamldoc.descriptions.registry import get_description_registry

HOST = "0.0.0.0"
PORT = 8001

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup: Pre-load the description registry
    logger.info("Loading description sets...")
    description_registry = get_description_registry()
    logger.info(f"Loaded {description_registry.count()} description sets")

    logger.info("yamldoc API ready")
    yield
    logger.info("Shutting down yamldoc API")


# Create FastAPI app
app = FastAPI(
    title="yamldoc API",
    description="""
## Annotated YAML documentation

Render a data tree as `key (Type): value` lines, with `# comment` lines
taken from a description tree that mirrors the data.

### Key Endpoints

- `POST /v1/document` - Render YAML, returns JSON `{text}`
- `POST /v1/document/text` - Render YAML, returns plain text
- `GET /v1/descriptions` - List stored description sets
- `GET /v1/descriptions/{key}` - Get a stored description tree
""",
    version=__version__,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers with /v1 prefix
app.include_router(document.router, prefix="/v1")
app.include_router(descriptions.router, prefix="/v1")


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "service": "yamldoc API",
        "version": __version__,
        "description": "Annotated documentation for YAML data",
        "docs": "/docs",
        "endpoints": {
            "document": "/v1/document",
            "descriptions": "/v1/descriptions",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    description_registry = get_description_registry()
    return {
        "status": "healthy",
        "descriptions_loaded": description_registry.count(),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "yamldoc.api.main:app",
        host=HOST,
        port=PORT,
        reload=True,
    )
