import logging
import os
import time
from contextlib import contextmanager
from typing import Iterator

log = logging.getLogger("call_analyzer")


def configure_logging(level: str = "") -> None:
    level = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@contextmanager
def timed(label: str) -> Iterator[None]:
    t0 = time.perf_counter()
    try:
        yield
    finally:
        dt = int((time.perf_counter() - t0) * 1000)
        log.debug("[timed] %s: %d ms", label, dt)
