"""UNDERBAR

A small functional utility library for sequences and mappings: slicing,
iteration and queries, reduction and ordering, multi-sequence combinators,
non-mutating merges, and function wrappers.

Every operation is exposed in this flat namespace::

    import underbar as _

    _.uniq([1, 2, 1])            # [1, 2]
    _.sort_by(people, "name")    # stable, new list
"""

from underbar.absent import ABSENT, is_absent
from underbar.access import FunctionRef, MethodName
from underbar.combinators import difference, flatten, intersection, zip_
from underbar.errors import (
    EmptyReductionError,
    InvalidArgumentError,
    InvalidSettingError,
    MethodNotFoundError,
    SchedulerShutdownError,
    UnderbarError,
)
from underbar.functions import delay, memoize, once
from underbar.iteration import (
    contains,
    each,
    every,
    filter_,
    index_of,
    invoke,
    map_,
    pluck,
    reject,
    some,
    uniq,
)
from underbar.objects import defaults, extend
from underbar.ordering import reduce_, shuffle, sort_by
from underbar.scheduling import DelayHandle, TimerQueue
from underbar.slicing import first, last

__all__ = [
    "ABSENT",
    "DelayHandle",
    "EmptyReductionError",
    "FunctionRef",
    "InvalidArgumentError",
    "InvalidSettingError",
    "MethodName",
    "MethodNotFoundError",
    "SchedulerShutdownError",
    "TimerQueue",
    "UnderbarError",
    "__version__",
    "contains",
    "defaults",
    "delay",
    "difference",
    "each",
    "every",
    "extend",
    "filter_",
    "first",
    "flatten",
    "index_of",
    "intersection",
    "invoke",
    "is_absent",
    "last",
    "map_",
    "memoize",
    "once",
    "pluck",
    "reduce_",
    "reject",
    "shuffle",
    "some",
    "sort_by",
    "uniq",
    "zip_",
]
__version__ = "0.1.0"
