"""FastAPI application entry - Markdown block parser service."""

import logging

from . import config
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import router

logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)s %(name)s %(message)s")

app = FastAPI(
    title="Markdown Blocks",
    description="Split Markdown text into typed document blocks",
    version="0.1.0",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(router)


@app.get("/")
async def root():
    return {"service": "markdown-blocks", "docs": "/docs"}
