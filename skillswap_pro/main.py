# skillswap_pro/main.py - remote store application
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from skillswap_pro import __version__
from skillswap_pro.api import store
from skillswap_pro.config import settings
from skillswap_pro.database import Base, engine
from skillswap_pro.logging_config import configure_logging

configure_logging(settings.LOG_LEVEL)

# Create database tables
Base.metadata.create_all(bind=engine)

# Initialize FastAPI app
app = FastAPI(title="SkillSwap Pro Store", version=__version__)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(store.router)         # /api?action=*


@app.get("/health")
def health_check():
    return {
        "status": "healthy",
        "message": "SkillSwap Pro store is running",
        "version": __version__,
    }
