"""Decorators used across the molattr package."""

import logging
from functools import wraps
from time import perf_counter

logger = logging.getLogger(__name__)


def time_it(func):
    """Measure the execution time of a function and log the result.

    Parameters
    ----------
    func:
        Callable to be wrapped.

    Returns
    -------
    callable
        Wrapped function that logs its runtime at :mod:`logging.INFO` level.

    """

    @wraps(func)
    def wrap(*args, **kwargs):
        start_time = perf_counter()
        result = func(*args, **kwargs)
        elapsed = perf_counter() - start_time
        logger.info("Function: %r took: %.4f sec to complete", func.__name__, elapsed)
        return result

    return wrap
