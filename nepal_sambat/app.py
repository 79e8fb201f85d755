import logging
import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from fastapi import FastAPI

from . import __version__
from .middleware.logging import LoggingMiddleware
from .routers import nepal_sambat as nepal_sambat_router

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())

app = FastAPI(title="nepal-sambat", version=__version__)

app.add_middleware(LoggingMiddleware)

app.include_router(nepal_sambat_router.router)


@app.get("/__health")
def health():
    return {"ok": True}


@app.get("/")
def root():
    return {"message": "nepal-sambat API is running. See /__health and /docs."}
