from dataclasses import dataclass
import os
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


@dataclass
class Settings:
    ip: str = "0.0.0.0"
    dashboard_port: int = 8080
    log_level: str = "INFO"
    verbose: bool = False  # Deprecated: use log_level instead
    hex_prefix: bool = False
    access_log_level: str | None = None

    def __post_init__(self):
        """Load settings from environment variables at instance creation time"""
        self.ip = os.getenv("DASHBOARD_HOST", "0.0.0.0")
        try:
            self.dashboard_port = int(os.getenv("DASHBOARD_PORT", "8080"))
        except ValueError:
            self.dashboard_port = 8080
        if not 0 < self.dashboard_port < 65536:
            self.dashboard_port = 8080

        # Log level configuration (LOG_LEVEL takes precedence over VERBOSE)
        log_level_env = os.getenv("LOG_LEVEL", "").upper()
        if log_level_env:
            self.log_level = log_level_env
        else:
            self.verbose = os.getenv("VERBOSE", "false").lower() == "true"
            self.log_level = "DEBUG" if self.verbose else "INFO"

        # Per-request loggers (uvicorn access log, rejected API input)
        self.access_log_level = os.getenv("ACCESS_LOG_LEVEL", "").upper() or None

        # Render targets with a leading 0x by default
        self.hex_prefix = os.getenv("TARGET_HEX_PREFIX", "false").lower() == "true"

    @property
    def api_url(self) -> str:
        return f"http://{self.ip}:{self.dashboard_port}"
