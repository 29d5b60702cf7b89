from .config import Settings
from .logging_setup import setup_logging


def run_with_settings(settings: Settings):
    logger = setup_logging(settings.log_level, settings.access_log_level)
    logger.info("Starting PoW target calculator API")

    import uvicorn
    from .web.api import app, set_default_prefix

    set_default_prefix(settings.hex_prefix)
    logger.info(
        "Serving on %s (targets %s 0x prefix)",
        settings.api_url,
        "with" if settings.hex_prefix else "without",
    )

    # Levels and handlers were set by setup_logging; uvicorn must not reset them
    config = uvicorn.Config(
        app,
        host=settings.ip,
        port=settings.dashboard_port,
        log_config=None,
        log_level=None,
    )
    server = uvicorn.Server(config)
    server.run()


def run_from_env():
    run_with_settings(Settings())
