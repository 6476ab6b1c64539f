# src/maproster/api/app.py
"""
FastAPI application wiring for the listing endpoint.

Run with `uvicorn maproster.api.app:app --port 3001`. Routes live in
`maproster.api.routes`.
"""

from __future__ import annotations

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from maproster.config.settings import get_settings
from maproster.core.logging import configure_logging

from .routes import router

configure_logging()

app = FastAPI(title=f"{get_settings().app.name} API", version="0.1.0")

# The map client may be served from any origin (device, emulator, web preview).
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(router)
