"""Opt-in phase timing for loading and rendering.

Set LLM_LOG_VIEWER_DEBUG_TIMING to "1", "true" or "yes" to log how long
each load and render phase takes. Durations go to this module's logger
at INFO level, which is enabled together with the flag.
"""

import logging
import os
import time
from contextlib import contextmanager
from typing import Callable, Iterator, Union

logger = logging.getLogger(__name__)

DEBUG_TIMING = os.getenv("LLM_LOG_VIEWER_DEBUG_TIMING", "").lower() in (
    "1",
    "true",
    "yes",
)

logger.setLevel(logging.INFO if DEBUG_TIMING else logging.NOTSET)


@contextmanager
def log_timing(phase: Union[str, Callable[[], str]]) -> Iterator[None]:
    """Log the wall time of the enclosed phase.

    ``phase`` may be a callable, evaluated once the phase is over, so the
    name can mention what the phase produced:

        with log_timing(lambda: f"Normalize ({len(records)} records)"):
            conversation = create_conversation(records)
    """
    if not DEBUG_TIMING:
        yield
        return

    started = time.perf_counter()
    try:
        yield
    finally:
        phase_name = phase() if callable(phase) else phase
        logger.info("%s took %.3fs", phase_name, time.perf_counter() - started)
