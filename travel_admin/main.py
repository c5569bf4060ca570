# travel_admin/main.py
import logging
import logging.config
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from travel_admin.core.config import settings
from travel_admin.core.errors import TravelAdminError
from travel_admin.db.session import engine, SessionLocal
from travel_admin.db.mixins import Base
# load DB models so Base.metadata is populated
import travel_admin.db.models  # noqa: F401
from travel_admin.services.admin_seed import ensure_default_admin

# Routers
from travel_admin.api.v1.auth import router as auth_router
from travel_admin.api.v1.packages import router as packages_router
from travel_admin.api.v1.upload import router as upload_router
from travel_admin.api.v1.enquiries import router as enquiries_router
from travel_admin.api.v1.contacts import router as contacts_router
from travel_admin.api.v1.testimonials import router as testimonials_router
from travel_admin.api.v1.email_settings import router as email_settings_router

logging.config.dictConfig({
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "detailed": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
        },
    },
    "handlers": {
        "default": {
            "formatter": "detailed",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",
        },
    },
    "loggers": {
        "travel_admin": {"handlers": ["default"], "level": settings.LOG_LEVEL},
        "sqlalchemy": {"handlers": ["default"], "level": "WARNING"},
    },
})
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME)


@app.on_event("startup")
def on_startup():
    Path(settings.PUBLIC_DIR).mkdir(parents=True, exist_ok=True)
    Base.metadata.create_all(bind=engine)
    with SessionLocal() as db:
        ensure_default_admin(db)
    logger.info("Database ready. Tables: %s", sorted(Base.metadata.tables.keys()))


@app.exception_handler(TravelAdminError)
def travel_admin_error_handler(request: Request, exc: TravelAdminError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


# Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept", "Origin", "X-Requested-With"],
)

# Routers
app.include_router(auth_router, prefix="/api")
app.include_router(packages_router, prefix="/api")
app.include_router(upload_router, prefix="/api")
app.include_router(enquiries_router, prefix="/api")
app.include_router(contacts_router, prefix="/api")
app.include_router(testimonials_router, prefix="/api")
app.include_router(email_settings_router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": settings.APP_NAME}


# Public assets (uploaded package images live under /assets/images/packages).
# Mounted last so it never shadows the API routes.
app.mount("/", StaticFiles(directory=settings.PUBLIC_DIR, check_dir=False), name="public")
