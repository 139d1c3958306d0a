import operator
from typing import Any, NamedTuple, Optional


class SizeHint(NamedTuple):
    '''Bounds on the number of elements an iterator may still produce.

    `upper` is `None` when no upper bound is known. Advisory only.
    '''

    lower: int
    upper: Optional[int]


def size_hint(iterator: Any) -> SizeHint:
    '''Return the bounds hint of an iterator.

    An object with its own `size_hint()` method reports its own bounds:

    >>> from take_until import take_until
    >>> size_hint(take_until([1, 2, 3], lambda x: x == 2))
    SizeHint(lower=0, upper=3)

    The iterators of built-in sequences know exactly how many elements remain:

    >>> it = iter([1, 2, 3])
    >>> _ = next(it)
    >>> size_hint(it)
    SizeHint(lower=2, upper=2)

    Nothing is known about a generator:

    >>> size_hint(x for x in [1, 2, 3])
    SizeHint(lower=0, upper=None)
    '''
    if (method := getattr(iterator, 'size_hint', None)) is not None:
        lower, upper = method()
        return SizeHint(lower, upper)
    n = operator.length_hint(iterator, -1)
    if n < 0:
        return SizeHint(0, None)
    return SizeHint(n, n)
