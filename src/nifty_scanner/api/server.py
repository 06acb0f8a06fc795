"""
HTTP routes for the scanner.
The scanner instance is read from `app.state.scanner`, which `create_app`
(see nifty_scanner.app) fills either at construction or on startup.
"""

import logging
from typing import List

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from nifty_scanner.core.models import StockResult

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def index():
    return "Nifty 50 Scanner Backend is running!"


@router.get("/health")
async def health():
    return {"status": "ok"}


@router.get("/api/stocks", response_model=List[StockResult])
async def list_stocks(request: Request):
    """Return all tracked symbols ordered by descending probability."""
    scanner = request.app.state.scanner
    try:
        return await scanner.scan()
    except Exception:
        logger.exception("Error processing stocks")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})
