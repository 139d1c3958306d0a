__all__ = [
    'take_until_gen',
    'st_batches',
    'st_list_until',
    'st_none_or',
    'st_predicate',
]

from .iteration import take_until_gen
from .st import st_batches, st_list_until, st_none_or, st_predicate
