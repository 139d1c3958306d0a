from collections.abc import Iterable, Iterator
from types import GeneratorType
from typing import Any, TypeVar

from .ext import TakeUntilExt
from .hint import SizeHint, size_hint

T = TypeVar('T')

# Built-in iterators that keep raising StopIteration once exhausted.
_FUSED_TYPES = tuple(
    {
        GeneratorType,
        type(iter([])),
        type(iter(())),
        type(iter(range(0))),
        type(iter(range(1 << 64))),
        type(iter('')),
        type(iter(b'')),
        type(iter(bytearray())),
        type(iter(set())),
        type(iter({})),
        type(iter({}.values())),
        type(iter({}.items())),
    }
)


def is_fused(iterator: Any) -> bool:
    '''True if the iterator is known to keep raising `StopIteration` once exhausted.

    An object declares itself fused with a truthy `fused` attribute:

    >>> from take_until import fuse, take_until
    >>> is_fused(fuse(iter([])))
    True

    The adapter is fused exactly when its source is:

    >>> is_fused(take_until([1, 2], bool))
    True
    >>> is_fused(take_until(map(str, [1, 2]), bool))
    False

    Generators and the iterators of built-in containers are fused:

    >>> is_fused(x for x in [])
    True
    '''
    if (fused := getattr(iterator, 'fused', None)) is not None:
        return bool(fused)
    return isinstance(iterator, _FUSED_TYPES)


class Fuse(TakeUntilExt[T]):
    '''An iterator that never calls its source again after the first `StopIteration`.

    Use `fuse()` to create one.
    '''

    fused = True

    def __init__(self, iterable: Iterable[T]) -> None:
        self.source: Iterator[T] = iter(iterable)
        self.exhausted = False

    def __next__(self) -> T:
        if self.exhausted:
            raise StopIteration
        try:
            return next(self.source)
        except StopIteration:
            self.exhausted = True
            raise

    def size_hint(self) -> SizeHint:
        if self.exhausted:
            return SizeHint(0, 0)
        return size_hint(self.source)

    def __length_hint__(self) -> int:
        lower, _ = self.size_hint()
        return lower

    def __repr__(self) -> str:
        name = self.__class__.__name__
        return f'{name}(source={self.source!r}, exhausted={self.exhausted!r})'


def fuse(iterable: Iterable[T]) -> Fuse[T]:
    '''Wrap an iterable so that it stays exhausted once it has raised `StopIteration`.

    >>> from take_until.test import Resumable
    >>> it = Resumable([[1], [2]])
    >>> list(it), list(it)
    ([1], [2])

    >>> it = fuse(Resumable([[1], [2]]))
    >>> list(it), list(it)
    ([1], [])
    '''
    return Fuse(iterable)
