from hypothesis import given
from hypothesis import strategies as st

from take_until import Fuse, fuse, is_fused, take_until
from take_until.test import RecordCalls, Resumable

from .utils import st_batches


def test_is_fused() -> None:
    assert is_fused(iter([]))
    assert is_fused(iter(()))
    assert is_fused(iter(range(3)))
    assert is_fused(iter('abc'))
    assert is_fused(iter(b'abc'))
    assert is_fused(iter({1: 2}))
    assert is_fused(iter({1: 2}.items()))
    assert is_fused(x for x in [])
    assert not is_fused(map(str, []))
    assert not is_fused(Resumable([]))
    assert is_fused(fuse(Resumable([])))


def test_adapter_declares_source() -> None:
    assert take_until([1], bool).fused
    assert not take_until(Resumable([[1]]), bool).fused
    assert take_until(fuse(Resumable([[1]])), bool).fused
    assert take_until(take_until([1], bool), bool).fused


def test_resumable_passthrough() -> None:
    source = Resumable([[1, 2], [3, 4, 5]])
    pred = RecordCalls(lambda x: x == 4)
    it = take_until(source, pred)
    assert [1, 2] == list(it)
    assert not it.done
    assert [3, 4] == list(it)
    assert it.done
    n_pulls = source.n_pulls
    assert [] == list(it)
    assert n_pulls == source.n_pulls
    assert [1, 2, 3, 4] == pred.args


def test_fused_source() -> None:
    source = fuse(Resumable([[1, 2], [3, 4, 5]]))
    it = take_until(source, lambda x: x == 4)
    assert [1, 2] == list(it)
    assert not it.done
    assert [] == list(it)
    assert source.exhausted


def test_fuse_repr() -> None:
    source = iter([1])
    it = Fuse(source)
    assert f'Fuse(source={source!r}, exhausted=False)' == repr(it)
    list(it)
    assert f'Fuse(source={source!r}, exhausted=True)' == repr(it)


@given(batches=st_batches(), n_pulls=st.integers(min_value=0, max_value=5))
def test_fuse_stays_exhausted(batches: list[list[int]], n_pulls: int) -> None:
    source = Resumable(batches)
    it = fuse(source)
    expected = batches[0] if batches else []
    assert expected == list(it)
    n_source_pulls = source.n_pulls
    for _ in range(n_pulls):
        assert [] == list(it)
    assert n_source_pulls == source.n_pulls
