from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar

from .ext import TakeUntilExt

T = TypeVar('T')


class RecordCalls(Generic[T]):
    '''Record the arguments and the return values of a predicate.

    This class is used to assert how many times, and on which elements, a
    predicate is called.

    >>> from take_until import take_until
    >>> pred = RecordCalls(lambda x: x == 2)
    >>> list(take_until([1, 2, 3], pred))
    [1, 2]
    >>> pred.args
    [1, 2]
    >>> pred.returns
    [False, True]
    '''

    def __init__(self, f: Callable[[T], Any]):
        self.f = f
        self.args = list[T]()
        self.returns = list[Any]()

    @property
    def n_calls(self) -> int:
        return len(self.args)

    def __call__(self, x: T) -> Any:
        self.args.append(x)
        ret = self.f(x)
        self.returns.append(ret)
        return ret


class Resumable(TakeUntilExt[T]):
    '''An iterator that resumes after raising `StopIteration`.

    Each batch is yielded followed by a `StopIteration`. The next pull starts
    the next batch.

    >>> it = Resumable([[1, 2], [], [3]])
    >>> list(it), list(it), list(it), list(it)
    ([1, 2], [], [3], [])

    The number of pulls, including the ones that raised, is counted:

    >>> it.n_pulls
    7
    '''

    def __init__(self, batches: Iterable[Iterable[T]]) -> None:
        self.batches = [list(b) for b in batches]
        self.n_pulls = 0
        self._batch = 0
        self._index = 0

    def __next__(self) -> T:
        self.n_pulls += 1
        if self._batch >= len(self.batches):
            raise StopIteration
        batch = self.batches[self._batch]
        if self._index >= len(batch):
            self._batch += 1
            self._index = 0
            raise StopIteration
        x = batch[self._index]
        self._index += 1
        return x

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(batch={self._batch}, index={self._index})'
