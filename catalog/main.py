from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from catalog.config import get_settings
from catalog.database import engine, Base, SessionLocal
from catalog.api import products, health
from catalog.api.errors import validation_exception_handler
from catalog.seed import seed_products
from catalog.web import pages

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    # Startup
    logger.info("Starting up application...")

    # Create database tables
    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created successfully")

    if settings.SEED_DATA:
        db = SessionLocal()
        try:
            seed_products(db)
        finally:
            db.close()

    yield

    # Shutdown
    logger.info("Shutting down application...")


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="""
    RESTful API for the Divine Shop product catalog:

    - **Product Management**: Full CRUD operations for products
    - **Listings**: Filtering by category, price range, sale and featured flags
    - **Sorting & Paging**: Sort by price, name, rating or date; 1-based pages of up to 50 items
    - **Shop UI**: Server-rendered catalog pages under `/shop`

    ## Effective price
    A product's discount price, when set, replaces its list price for both
    price filtering and price sorting.

    ## Errors
    Validation failures return `400` with messages grouped by field.
    Unknown product ids return `404`.
    """,
    version=settings.APP_VERSION,
    license_info={
        "name": "MIT",
        "url": "https://opensource.org/licenses/MIT"
    },
    lifespan=lifespan
)

app.add_exception_handler(RequestValidationError, validation_exception_handler)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(health.router, prefix=settings.API_PREFIX)
app.include_router(products.router, prefix=settings.API_PREFIX)
app.include_router(pages.router)


@app.get("/", tags=["Root"])
def root():
    """Root endpoint with API information."""
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "redoc": "/redoc",
        "health": f"{settings.API_PREFIX}/health",
        "products": f"{settings.API_PREFIX}/products",
        "shop": "/shop"
    }
