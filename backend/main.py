from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .database import engine, Base
from .routers import calculations, library

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("workroom")

# Create tables for the workroom library
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title=settings.APP_NAME,
    description="Fabric usage and cost calculations for curtain and blind workrooms",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(calculations.router, prefix="/api")
app.include_router(library.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "drapery-workroom-calculator"}


@app.on_event("startup")
def auto_seed():
    """Auto-seed the default templates and fabrics on first run."""
    from .database import SessionLocal
    db = SessionLocal()
    try:
        seeded = library.seed_library_records(db)
        if seeded:
            logger.info("Seeded %d workroom library records", seeded)
    finally:
        db.close()
