import sys
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

if TYPE_CHECKING:
    from .adapter import TakeUntil
    from .fuse import Fuse

T = TypeVar('T')


class TakeUntilExt(Iterator[T], Generic[T]):
    '''Add the `take_until()` and `fuse()` methods to an iterator class.

    Subclass it in place of `collections.abc.Iterator`:

    >>> class Countdown(TakeUntilExt[int]):
    ...     def __init__(self, start: int) -> None:
    ...         self.n = start
    ...
    ...     def __next__(self) -> int:
    ...         if self.n < 0:
    ...             raise StopIteration
    ...         self.n -= 1
    ...         return self.n + 1

    >>> list(Countdown(5).take_until(lambda x: x % 2 == 0))
    [5, 4]

    The adapters of this package inherit it, so they chain:

    >>> list(Countdown(9).take_until(lambda x: x < 5).take_until(lambda x: x == 7))
    [9, 8, 7]
    '''

    def __iter__(self) -> Self:
        return self

    def take_until(self, predicate: Callable[[T], Any]) -> 'TakeUntil[T]':
        '''Yield until after the first element for which `predicate` is true.'''
        from .adapter import TakeUntil

        return TakeUntil(self, predicate)

    def fuse(self) -> 'Fuse[T]':
        '''Stop for good after the first `StopIteration`.'''
        from .fuse import Fuse

        return Fuse(self)
