import coloredlogs, logging

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Loggers that follow the access log level rather than the application level
ACCESS_LOGGERS = ("uvicorn.access", "WebAPI")


def _resolve_level(level, default: str) -> str:
    # Handle backwards compatibility: boolean input
    if isinstance(level, bool):
        return "DEBUG" if level else "INFO"
    if level is None:
        return default
    name = str(level).upper()
    if name not in VALID_LEVELS:
        print(
            f"Invalid log level '{name}'. Using '{default}'. Valid levels: {set(VALID_LEVELS)}"
        )
        return default
    return name


def setup_logging(log_level="INFO", access_log_level=None):
    """
    Setup logging for the CLI and the calculator API.

    Args:
        log_level: Application level as string ("DEBUG", "INFO", ...) or boolean
                  (True=DEBUG, False=INFO) for backwards compatibility
        access_log_level: Level for per-request loggers (uvicorn access log and
                  rejected API input). None keeps them at WARNING unless the
                  application runs at DEBUG, where they follow it.

    Returns:
        Logger instance configured with coloredlogs
    """
    log_level = _resolve_level(log_level, "INFO")
    level_const = getattr(logging, log_level)

    # Root first, coloredlogs then formats every child logger the same way
    logging.getLogger().setLevel(level_const)
    coloredlogs.install(level=log_level, milliseconds=True)

    logger = logging.getLogger("PowTarget")
    logger.setLevel(level_const)

    if access_log_level is None:
        access_log_level = "DEBUG" if level_const == logging.DEBUG else "WARNING"
    access_const = getattr(logging, _resolve_level(access_log_level, "WARNING"))
    for name in ACCESS_LOGGERS:
        logging.getLogger(name).setLevel(access_const)

    return logger
