"""FastAPI application factory."""
from __future__ import annotations

import json
import logging
from functools import partial
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.concurrency import run_in_threadpool

from enumwarp.config import Settings
from enumwarp.github import handle_github_event, verify_signature
from enumwarp.github.webhook import SyncFunc
from enumwarp.sync import sync_commit

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, sync: Optional[SyncFunc] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    sync = sync or partial(sync_commit, settings=settings)

    app = FastAPI(title="enumwarp webhook", version="0.1.0")

    @app.get("/health", tags=["ops"])
    def health() -> dict:
        return {"status": "ok"}

    @app.post("/github", tags=["webhook"])
    async def github(request: Request):
        raw_body = await request.body()
        signature = request.headers.get("x-hub-signature-256") or request.headers.get("x-hub-signature")
        if not verify_signature(settings.webhook_secret, raw_body, signature):
            logger.error("GitHub request verification failed")
            return PlainTextResponse("Bad Request", status_code=400)

        try:
            payload = json.loads(raw_body or b"{}")
        except ValueError:
            return PlainTextResponse("Bad Request", status_code=400)
        if not isinstance(payload, dict):
            return PlainTextResponse("Bad Request", status_code=400)

        event_type = request.headers.get("x-github-event")
        try:
            # Fetching and loading block on network I/O
            status, body = await run_in_threadpool(handle_github_event, settings, event_type, payload, sync)
        except Exception as e:
            logger.exception("Enum sync failed")
            return PlainTextResponse(str(e), status_code=500)

        if isinstance(body, str):
            return PlainTextResponse(body, status_code=status)
        return JSONResponse(body, status_code=status)

    return app
