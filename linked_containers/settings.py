import logging.config
import os


# ----- Environment helpers -----
def get_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "on"}


DEBUG = get_bool("LINKED_CONTAINERS_DEBUG", False)


# ----- Integrity checks -----
# Walk the whole chain after every mutation. O(n) per operation, debug only.
CHECK_INVARIANTS = get_bool("LINKED_CONTAINERS_CHECK_INVARIANTS", DEBUG)


# ----- Logging -----
LOG_LEVEL = "DEBUG" if DEBUG else os.getenv("LINKED_CONTAINERS_LOG_LEVEL", "INFO")
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "[%(levelname)s] %(name)s: %(message)s"},
        "verbose": {
            "format": "%(asctime)s [%(levelname)s] %(name)s (%(module)s:%(lineno)d): %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple" if DEBUG else "verbose",
        }
    },
    "loggers": {
        "linked_containers": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
    },
}


def configure_logging(config=None):
    """Apply ``LOGGING`` (or the given dictConfig mapping) to the package loggers."""
    logging.config.dictConfig(config or LOGGING)
