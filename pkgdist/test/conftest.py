from __future__ import annotations

from collections.abc import Iterator

import pytest

from pkgdist.backend import log as backend_log
from pkgdist.output.log import logger


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Undo the process-wide logging setup done by CLI runs."""
    handlers = list(logger.handlers)
    level = logger.level
    severity = backend_log.level()
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)
    backend_log.set_level(severity)
