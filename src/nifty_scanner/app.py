import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nifty_scanner.api.server import router
from nifty_scanner.clients.alphavantage_client import AlphaVantageClient
from nifty_scanner.config import Settings, configure_logging, load_settings
from nifty_scanner.scanner.cache import ResultCache
from nifty_scanner.scanner.orchestrator import StockScanner
from nifty_scanner.scanner.rate_limit import FixedDelayLimiter

logger = logging.getLogger(__name__)


def build_scanner(settings: Settings) -> StockScanner:
    """Wire the provider client, cache and limiter from settings."""
    if not settings.alpha_vantage_api_key:
        logger.warning("ALPHA_VANTAGE_API_KEY not set; every symbol will use fallback data")

    client = AlphaVantageClient(settings.alpha_vantage_api_key, timeout=settings.provider_timeout_seconds)
    return StockScanner(
        client,
        cache=ResultCache(ttl_seconds=settings.cache_ttl_seconds),
        limiter=FixedDelayLimiter(settings.request_delay_seconds),
    )


def create_app(scanner: Optional[StockScanner] = None) -> FastAPI:
    app = FastAPI(title="Nifty 50 Scanner", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router)
    app.state.scanner = scanner

    # --- Startup event to load config and build the scanner ---
    @app.on_event("startup")
    async def startup_event():
        if app.state.scanner is not None:
            return
        settings = load_settings()
        configure_logging(settings.log_level)
        app.state.scanner = build_scanner(settings)
        logger.info("Scanner ready for %d symbols", len(app.state.scanner.symbols))

    return app


app = create_app()


def main() -> None:
    import uvicorn

    settings = load_settings()
    configure_logging(settings.log_level)
    uvicorn.run("nifty_scanner.app:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
