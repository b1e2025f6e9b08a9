"""Function wrappers: `once`, `memoize` and `delay`.

Wrapper state is owned by the closure returned from each call and guarded by
a lock, because delayed calls run on the timer thread.
"""

import threading
from collections.abc import Callable, Hashable
from functools import wraps
from typing import Any, ParamSpec, TypeVar

from underbar.equality import strict_key
from underbar.errors import InvalidArgumentError
from underbar.scheduling import DelayHandle, get_timer_queue

P = ParamSpec("P")
R = TypeVar("R")


def once(func: Callable[P, R]) -> Callable[P, R]:
    """Return a wrapper that calls *func* at most once.

    The first call forwards its arguments to *func* and caches the return
    value; every later call returns that value without calling *func*,
    whatever arguments it receives. If the first call raises, nothing is
    cached and the next call tries again.

    Note:
        The wrapper is not re-entrant: *func* must not call its own wrapper.
    """
    lock = threading.Lock()
    called = False
    value: Any = None

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        nonlocal called, value
        with lock:
            if not called:
                value = func(*args, **kwargs)
                called = True
            return value

    return wrapper


def _strict_key(key: object) -> Hashable:
    try:
        return strict_key(key)
    except TypeError as e:
        raise InvalidArgumentError(
            f"memoize requires a hashable key, got {type(key).__name__}"
        ) from e


def memoize(
    func: Callable[[Any], R], key: Callable[[Any], Hashable] | None = None
) -> Callable[[Any], R]:
    """Return a single-argument wrapper that caches results of *func*.

    A result is reused whenever its key is already cached, whatever the
    result's truthiness (``0``, ``""``, ``False`` and ``None`` are cached like
    any other value). Keys are strict: ``1``, ``1.0`` and ``True`` are distinct.

    Args:
        func: The function to memoize; it takes one argument.
        key: Optional function deriving the cache key from the argument.
            Defaults to the argument itself.

    Returns:
        The caching wrapper. It exposes ``cache_clear()`` to drop all entries.

    Raises:
        InvalidArgumentError: When the wrapper is called with an unhashable key.
    """
    lock = threading.Lock()
    cache: dict[Hashable, R] = {}

    @wraps(func)
    def wrapper(arg: Any) -> R:
        cache_key = _strict_key(key(arg) if key is not None else arg)
        with lock:
            if cache_key in cache:
                return cache[cache_key]
        # computed outside the lock so recursive memoized functions work
        result = func(arg)
        with lock:
            return cache.setdefault(cache_key, result)

    def cache_clear() -> None:
        with lock:
            cache.clear()

    wrapper.cache_clear = cache_clear  # type: ignore[attr-defined]
    return wrapper


def delay(func: Callable[..., Any], wait_ms: float, /, *args: Any, **kwargs: Any) -> DelayHandle:
    """Call ``func(*args, **kwargs)`` once, after *wait_ms* milliseconds.

    Returns immediately. The call runs on the shared timer thread.

    Example:
        ``delay(greet, 500, "a", "b")`` calls ``greet("a", "b")`` after 500 ms.

    Returns:
        DelayHandle: Handle that can cancel the call or wait for its result.

    Raises:
        InvalidArgumentError: If *func* is not callable or *wait_ms* is negative.
    """
    return get_timer_queue().schedule(func, wait_ms, *args, **kwargs)
