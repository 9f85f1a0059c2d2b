"""
Miscelaneous utilities.
"""

import inspect
import time
from datetime import date
from functools import wraps
from typing import Callable

from movie_catalog.logger import logger

_MONTHS = (
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
)


def timed(func) -> Callable:
    if inspect.iscoroutinefunction(func):
        @wraps(func)
        async def timed_coro(*args, **kwargs):
            init = time.perf_counter()
            out = await func(*args, **kwargs)
            end = time.perf_counter() - init
            logger.info(f"{func.__name__} finished in {1000 * end:.2f} ms")
            return out
        return timed_coro

    @wraps(func)
    def timed_func(*args, **kwargs):
        init = time.perf_counter()
        out = func(*args, **kwargs)
        end = time.perf_counter() - init
        logger.info(f"{func.__name__} finished in {1000 * end:.2f} ms")
        return out
    return timed_func


def format_long_date(day: date) -> str:
    """Render a date as e.g. '19 October 2026', independent of the process locale."""
    return f"{day.day} {_MONTHS[day.month - 1]} {day.year}"
