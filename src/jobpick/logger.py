"""Logging for jobpick, keyed to what a selector run reports at each -v level.

    -v      RUN       one summary line per selector run (count, comparisons, time)
    -vv     DECISION  each task accepted or rejected, and benchmark sizes skipped
    -vvv    DEBUG     every branch of the exhaustive search
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

RUN = 25
DECISION = 15

logging.addLevelName(RUN, "RUN")
logging.addLevelName(DECISION, "DECISION")

# Index is the -v count; anything past the end means full trace
_LEVEL_FOR_VERBOSITY = (logging.ERROR, RUN, DECISION, logging.DEBUG)

LOGGER_NAME = "jobpick"


class JobpickLogger(logging.Logger):
    def run_summary(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Report the outcome of one selector run."""
        if self.isEnabledFor(RUN):
            self._log(RUN, msg, args, **kwargs)

    def decision(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Report why a single task or size was taken or skipped."""
        if self.isEnabledFor(DECISION):
            self._log(DECISION, msg, args, **kwargs)


def get_logger() -> JobpickLogger:
    """Return the shared jobpick logger, silent until setup_logger() is called."""
    logging.setLoggerClass(JobpickLogger)
    logger = logging.getLogger(LOGGER_NAME)
    logging.setLoggerClass(logging.Logger)
    assert isinstance(logger, JobpickLogger)
    return logger


def level_for_verbosity(verbosity: int) -> int:
    if verbosity <= 0:
        return logging.ERROR
    return _LEVEL_FOR_VERBOSITY[min(verbosity, len(_LEVEL_FOR_VERBOSITY) - 1)]


def setup_logger(verbosity: int, stream: TextIO | None = None) -> None:
    """Send jobpick messages up to the given -v count to stream (stderr by default).

    Reconfiguring replaces the previous handler, so repeated CLI invocations
    in one process do not duplicate output.
    """
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(level_for_verbosity(verbosity))

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


def reset_logger() -> None:
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(logging.ERROR)
    logger.propagate = True


def summaries_enabled() -> bool:
    return get_logger().isEnabledFor(RUN)


def decisions_enabled() -> bool:
    """True at -vv and above; selectors use it to skip per-task formatting."""
    return get_logger().isEnabledFor(DECISION)


def trace_enabled() -> bool:
    """True at -vvv, where the exhaustive search logs every branch."""
    return get_logger().isEnabledFor(logging.DEBUG)
