import logging
import os

logger = logging.getLogger(__name__)


def set_env(name: str, value: str, override: bool = True) -> bool:
    """Set a process environment variable.

    An existing variable is left alone when override is False, which still
    counts as success. Returns False if the platform rejects the name/value.
    """
    if not override and os.getenv(name) is not None:
        return True
    try:
        os.environ[name] = value
    except (ValueError, OSError) as e:
        logger.debug("Failed to set environment variable %r: %s", name, e)
        return False
    return True
