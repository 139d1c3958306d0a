import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any, TypeVar

from .ext import TakeUntilExt
from .fuse import is_fused
from .hint import SizeHint, size_hint

T = TypeVar('T')

logger = logging.getLogger(__name__)


class TakeUntil(TakeUntilExt[T]):
    '''Yield elements until after the first one for which the predicate is true.

    The element that satisfies the predicate is yielded. Compare with
    `itertools.takewhile()` with the negated condition, which drops it:

    >>> from itertools import takewhile
    >>> items = [1, 2, 3, 4, -5, -6, -7, -8]
    >>> list(takewhile(lambda x: x > 0, items))
    [1, 2, 3, 4]
    >>> list(TakeUntil(items, lambda x: x <= 0))
    [1, 2, 3, 4, -5]

    The predicate is called once for each element pulled from the source and
    never after it has returned true. Neither the source nor the predicate is
    touched on construction.

    >>> it = TakeUntil(iter([1, 2, 3]), lambda x: x == 1)
    >>> it
    TakeUntil(source=<list_iterator object at ...>, done=False)
    >>> next(it)
    1
    >>> it
    TakeUntil(source=<list_iterator object at ...>, done=True)
    >>> next(it)
    Traceback (most recent call last):
      ...
    StopIteration

    If the source raises `StopIteration` before the predicate is satisfied,
    the adapter is not marked done. A source that resumes after that is pulled
    again on the next call. Use `fuse()` on the source to prevent this.
    '''

    def __init__(self, iterable: Iterable[T], predicate: Callable[[T], Any]) -> None:
        self.source: Iterator[T] = iter(iterable)
        self.predicate = predicate
        self.done = False

    @property
    def fused(self) -> bool:
        '''True if the source is fused, in which case so is the adapter.'''
        return is_fused(self.source)

    def __next__(self) -> T:
        if self.done:
            raise StopIteration
        x = next(self.source)
        if self.predicate(x):
            self.done = True
            logger.debug('%r: predicate satisfied; no more elements', self)
        return x

    def size_hint(self) -> SizeHint:
        '''Return `(0, upper)` with the source's upper bound, or `(0, 0)` once done.

        The lower bound is always 0 because the predicate can end the
        iteration at any element.

        >>> it = TakeUntil([0, 1, 2], lambda _: True)
        >>> it.size_hint()
        SizeHint(lower=0, upper=3)
        >>> _ = next(it)
        >>> it.size_hint()
        SizeHint(lower=0, upper=0)
        '''
        if self.done:
            return SizeHint(0, 0)
        _, upper = size_hint(self.source)
        return SizeHint(0, upper)

    def __length_hint__(self) -> int:
        _, upper = self.size_hint()
        if upper is None:
            # operator.length_hint() falls back to its default.
            return NotImplemented  # type: ignore[return-value]
        return upper

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(source={self.source!r}, done={self.done!r})'


def take_until(iterable: Iterable[T], predicate: Callable[[T], Any]) -> TakeUntil[T]:
    '''Iterate until after yielding the first element that satisfies the predicate.

    Parse a base 128 varint from bytes. The last byte of the number is the
    first one with the top bit clear:

    >>> varint = bytes([0b1010_1100, 0b0000_0010, 0b1000_0001])
    >>> groups = list(take_until(varint, lambda b: b & 0b1000_0000 == 0))
    >>> [bin(b) for b in groups]
    ['0b10101100', '0b10']
    >>> sum((b & 0b0111_1111) << (i * 7) for i, b in enumerate(groups))
    300

    All elements are yielded if none satisfies the predicate:

    >>> list(take_until([1, 2, 3], lambda x: x > 100))
    [1, 2, 3]
    '''
    return TakeUntil(iterable, predicate)
