'''Lazily take elements from an iterable until a predicate is satisfied.

The element that satisfies the predicate is included:

>>> from take_until import take_until
>>> list(take_until([1, 2, 3, 4, -5, -6], lambda x: x <= 0))
[1, 2, 3, 4, -5]
'''

__all__ = [
    '__version__',
    'take_until',
    'TakeUntil',
    'TakeUntilExt',
    'fuse',
    'Fuse',
    'is_fused',
    'size_hint',
    'SizeHint',
]

from importlib.metadata import PackageNotFoundError, version

from .adapter import TakeUntil, take_until
from .ext import TakeUntilExt
from .fuse import Fuse, fuse, is_fused
from .hint import SizeHint, size_hint

try:
    __version__ = version('take-until')
except PackageNotFoundError:
    __version__ = '0.0.0'
