import time
import functools
from typing import Any, Callable, Iterable, TypeVar
from typing_extensions import ParamSpec
from vintagepy.kernel.system.logging import get_logger

logger = get_logger("perf")

P = ParamSpec("P")
R = TypeVar("R")


def _first_shape(values: Iterable[Any]) -> Any:
    for val in values:
        if hasattr(val, "shape"):
            return val.shape
    return None


def time_function(func: Callable[P, R]) -> Callable[P, R]:
    """
    Logs wall time of the wrapped call at DEBUG, tagged with the shape of the
    first array-like argument.
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        start = time.perf_counter()
        result = func(*args, **kwargs)
        duration_ms = (time.perf_counter() - start) * 1000

        shape = _first_shape(args)
        if shape is None:
            shape = _first_shape(kwargs.values())

        logger.debug(f"PERF: {func.__name__} took {duration_ms:.3f}ms (shape: {shape or 'N/A'})")
        return result

    return wrapper
