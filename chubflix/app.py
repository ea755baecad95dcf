import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI

from chubflix.routes import router

load_dotenv(Path(__file__).parent.parent / ".env")


def create_app() -> FastAPI:
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())

    app = FastAPI(title="Chubflix Next Episode")
    app.include_router(router, prefix="/api")
    return app


# Default app instance for uvicorn
app = create_app()
