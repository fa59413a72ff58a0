import logging
from typing import Iterable, Optional


# The genai SDK logs every HTTP round trip at INFO through these.
NOISY_LOGGERS = ("httpx", "httpcore", "google_genai")


def configure_logging(level: Optional[str] = None, quiet: Iterable[str] = NOISY_LOGGERS) -> None:
    log_level = (level or "INFO").upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # basicConfig leaves the level alone once a handler is installed.
    logging.getLogger().setLevel(log_level)
    if logging.getLogger().getEffectiveLevel() > logging.DEBUG:
        for name in quiet:
            logging.getLogger(name).setLevel(logging.WARNING)
