"""
SmartClass Scheduling Backend - Main Application

FastAPI backend with:
- MongoDB for every entity (one collection each)
- JWT authentication (teachers log in by faculty name)
- Timetable replace-by-grade and substitute swap approval

Run: uvicorn smartclass.main:app --reload
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from smartclass import __version__
from smartclass.api.routes import api_router
from smartclass.core.config import get_settings
from smartclass.core.errors import register_exception_handlers
from smartclass.db.mongodb import (
    connect_mongo, close_mongo, get_mongo_db, init_mongo_indexes, check_mongo_connection
)

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="SmartClass Scheduling API",
    description="""
    Class-scheduling administration backend.

    ## Features
    - **Authentication**: signup for students/admins, JWT login for all roles
    - **Academic structure**: faculty, grades, classrooms, labs, subjects
    - **Timetable**: replace a grade's schedule in one call
    - **Swaps**: substitute-teacher requests; approval updates the timetable
    - **Leaves & Feedback**
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Routes are mounted at the root: /login, /faculty, /schedules, ...
app.include_router(api_router)


@app.on_event("startup")
def startup_event():
    """Open the MongoDB client and make sure indexes exist."""
    connect_mongo()
    try:
        init_mongo_indexes(get_mongo_db())
    except Exception as e:
        logger.warning("MongoDB index initialization failed: %s", e)
    logger.info("SmartClass API started (auth gate: %s)", settings.auth_gate)


@app.on_event("shutdown")
def shutdown_event():
    close_mongo()


@app.get("/", tags=["Health"])
def root():
    return {"status": "healthy", "app": "SmartClass Scheduling API"}


@app.get("/health", tags=["Health"])
def health_check():
    """Detailed health check."""
    mongo_ok = check_mongo_connection()
    return {
        "status": "healthy" if mongo_ok else "degraded",
        "mongodb": "connected" if mongo_ok else "disconnected"
    }
