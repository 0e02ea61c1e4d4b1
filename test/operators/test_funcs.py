import pytest

import seqex
from seqex import Sequence, BadArgumentError


class RecordingIterator:
    def __init__(self, iterable):
        self.iterator = iter(iterable)
        self.log = []

    def __iter__(self):
        return self

    def __next__(self):
        item = next(self.iterator)
        self.log.append(item)
        return item


def test_map_filter():
    seq = Sequence([1, 2, 3, 4])
    assert list(seq.map(lambda x: x * 10)) == [10, 20, 30, 40]
    assert list(seq.filter(lambda x: x % 2 == 0)) == [2, 4]
    assert list(seqex.map(seq, str)) == list(seq.map(str))


def test_map_is_replayable():
    doubled = Sequence([1, 2]).map(lambda x: x * 2)
    assert list(doubled) == [2, 4]
    assert list(doubled) == [2, 4]


def test_map_single_pass():
    doubled = Sequence(iter([1, 2, 3])).map(lambda x: x * 2)
    assert doubled.get(0) == 2
    assert list(doubled) == [4, 6]
    assert list(doubled) == []


def test_validation_happens_at_call_time():
    with pytest.raises(BadArgumentError) as excinfo:
        seqex.map([1], 3)
    assert excinfo.value.position == 2
    assert excinfo.value.operator == 'map'

    with pytest.raises(BadArgumentError) as excinfo:
        seqex.take(None, 1)
    assert excinfo.value.position == 1

    with pytest.raises(BadArgumentError):
        Sequence([1]).take(-1)
    with pytest.raises(BadArgumentError):
        Sequence([1]).take(True)
    with pytest.raises(BadArgumentError):
        Sequence([1]).step(0)
    with pytest.raises(BadArgumentError):
        Sequence([1]).buffer(0)


def test_callback_errors_propagate():
    def boom(x):
        raise KeyError(x)

    seq = Sequence([1, 2]).map(boom)
    with pytest.raises(KeyError):
        list(seq)


def test_take_skip():
    seq = Sequence([1, 2, 3, 4, 5])
    assert list(seq.take(2)) == [1, 2]
    assert list(seq.take(0)) == []
    assert list(seq.take(10)) == [1, 2, 3, 4, 5]
    assert list(seq.skip(3)) == [4, 5]
    assert list(seq.skip(10)) == []


def test_take_does_not_overpull():
    it = RecordingIterator(range(10))
    assert list(Sequence(it).take(3)) == [0, 1, 2]
    assert it.log == [0, 1, 2]


def test_take_on_infinite_range():
    assert list(seqex.range(0).take(4)) == [0, 1, 2, 3]
    assert list(seqex.range(0).map(lambda x: x * x).skip(2).take(2)) == [4, 9]


def test_slice_step():
    seq = Sequence(range(10))
    assert list(seq.slice(2, 5)) == [2, 3, 4]
    assert list(seq.slice(5, 2)) == []
    assert list(seq.step(4)) == [0, 4, 8]


def test_skip_last():
    assert list(Sequence([1, 2, 3, 4]).skip_last(1)) == [1, 2, 3]
    assert list(Sequence([1, 2]).skip_last(5)) == []
    assert list(Sequence([1, 2]).skip_last(0)) == [1, 2]


def test_while_until():
    seq = Sequence([1, 2, 5, 1, 7])
    assert list(seq.take_while(lambda x: x < 3)) == [1, 2]
    assert list(seq.skip_while(lambda x: x < 3)) == [5, 1, 7]
    assert list(seq.take_until(lambda x: x > 4)) == [1, 2]
    assert list(seq.skip_until(lambda x: x > 4)) == [5, 1, 7]


def test_element_at():
    seq = Sequence("abc")
    assert list(seq.element_at(1)) == ["b"]
    assert list(seq.element_at(3)) == []
    assert seq.element_at(3).get(0) is None


def test_first_last():
    seq = Sequence([1, 2, 3, 4])
    assert seq.first().get(0) == 1
    assert seq.first(lambda x: x > 2).get(0) == 3
    assert seq.last().get(0) == 4
    assert seq.last(lambda x: x < 3).get(0) == 2
    assert list(seq.first(lambda x: x > 9)) == []
    assert list(Sequence([]).last()) == []


def test_first_stops_early():
    it = RecordingIterator(range(10))
    assert Sequence(it).first(lambda x: x == 2).get(0) == 2
    assert it.log == [0, 1, 2]


def test_find_index_of_contains():
    seq = Sequence(["a", "b", "c"])
    assert seq.find(lambda x: x == "c").get(0) == 2
    assert list(seq.find(lambda x: x == "z")) == []
    assert seq.index_of("b").get(0) == 1
    assert seq.contains("c").get(0) is True
    assert seq.contains("z").get(0) is False


def test_all_any():
    seq = Sequence([2, 4, 5])
    assert seq.all(lambda x: x > 0).get(0) is True
    assert seq.all(lambda x: x % 2 == 0).get(0) is False
    assert seq.any(lambda x: x % 2 == 1).get(0) is True
    assert seq.any(lambda x: x > 9).get(0) is False
    assert Sequence([]).all(lambda x: False).get(0) is True
    assert Sequence([]).any(lambda x: True).get(0) is False


def test_is_empty_default_if_empty():
    assert Sequence([]).is_empty().get(0) is True
    assert Sequence([0]).is_empty().get(0) is False
    assert list(Sequence([]).default_if_empty(7)) == [7]
    assert list(Sequence([1, 2]).default_if_empty(7)) == [1, 2]


def test_distinct():
    assert list(Sequence([1, 2, 1, 3, 2]).distinct()) == [1, 2, 3]
    assert list(Sequence([[1], [2], [1]]).distinct()) == [[1], [2]]
    assert list(Sequence([1, 1, 2, 2, 1]).distinct_adjacent()) == [1, 2, 1]


def test_flat():
    assert list(Sequence([[1, 2], 3, (4, )]).flat()) == [1, 2, 3, 4]
    assert list(Sequence([[1, [2]]]).flat()) == [1, [2]]
    assert list(Sequence(["ab", "cd"]).flat()) == ["ab", "cd"]
    assert list(Sequence([1, 2]).flat_map(lambda x: [x, -x])) == [1, -1, 2, -2]


def test_intersperse():
    assert list(Sequence([1, 2, 3]).intersperse(0)) == [1, 0, 2, 0, 3]
    assert list(Sequence([]).intersperse(0)) == []


def test_buffer():
    chunks = list(Sequence(range(5)).buffer(2))
    assert all(isinstance(chunk, Sequence) for chunk in chunks)
    assert [list(chunk) for chunk in chunks] == [[0, 1], [2, 3], [4]]


def test_repeat():
    assert list(Sequence([1, 2]).repeat(3)) == [1, 2, 1, 2, 1, 2]
    assert list(Sequence([1, 2]).repeat(0)) == []


def test_replace():
    assert list(Sequence("abc").replace(1, "z")) == ["a", "z", "c"]
    assert list(Sequence("abc").replace(5, "z")) == ["a", "b", "c"]


def test_hooks():
    events = []
    seq = (
        Sequence([1, 2])
        .on_start(lambda: events.append("start"))
        .on_yield(lambda x: events.append(x))
        .on_done(lambda: events.append("done"))
    )
    assert events == []
    assert list(seq) == [1, 2]
    assert events == ["start", 1, 2, "done"]


def test_on_done_not_called_when_abandoned():
    events = []
    seq = Sequence([1, 2, 3]).on_done(lambda: events.append("done"))
    assert list(seq.take(2)) == [1, 2]
    assert events == []
