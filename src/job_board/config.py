import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_API_BASE_URL = "https://jsonplaceholder.typicode.com"


def get_config() -> dict[str, str]:
    """
    Load configuration from environment variables.
    Called lazily so that importing the package never fails.
    """
    return {
        "JOBS_API_BASE_URL": os.getenv("JOBS_API_BASE_URL", DEFAULT_API_BASE_URL),
        "PAGE_SIZE": os.getenv("PAGE_SIZE", "10"),
        "LOG_LEVEL": os.getenv("LOG_LEVEL", "WARNING"),
    }


class _Config:
    """Lazy configuration that only validates when values are actually accessed."""

    def __init__(self) -> None:
        self._config: dict[str, str] | None = None

    def _load(self) -> dict[str, str]:
        if self._config is None:
            self._config = get_config()
        return self._config

    @property
    def JOBS_API_BASE_URL(self) -> str:
        """Base URL of the placeholder API, without a trailing slash."""
        return self._load()["JOBS_API_BASE_URL"].rstrip("/")

    @property
    def PAGE_SIZE(self) -> int:
        """Number of listings requested per page. Must be a positive integer."""
        raw = self._load()["PAGE_SIZE"]
        try:
            size = int(raw)
        except ValueError:
            raise ValueError(f"PAGE_SIZE must be a positive integer, got '{raw}'") from None
        if size <= 0:
            raise ValueError(f"PAGE_SIZE must be a positive integer, got {size}")
        return size

    @property
    def LOG_LEVEL(self) -> str:
        return self._load()["LOG_LEVEL"].upper()


_cfg = _Config()

# Declared for type checkers; the values are resolved by __getattr__ below.
JOBS_API_BASE_URL: str
PAGE_SIZE: int
LOG_LEVEL: str


# Module-level lazy access (PEP 562): `from job_board.config import PAGE_SIZE`
# resolves the value on first access, not at import time of this module.
def __getattr__(name: str) -> str | int:
    if name == "JOBS_API_BASE_URL":
        return _cfg.JOBS_API_BASE_URL
    if name == "PAGE_SIZE":
        return _cfg.PAGE_SIZE
    if name == "LOG_LEVEL":
        return _cfg.LOG_LEVEL
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
