import pytest

from wcstl.iterator import Iterator, IteratorOperationError, IterOp


class ForwardOnly(Iterator):
    ops = IterOp.INC | IterOp.NEXT

    def __init__(self, pos=0):
        self.pos = pos

    def _move(self, n):
        self.pos += n

    def _position(self):
        return self.pos

    def copy(self):
        return ForwardOnly(self.pos)

    def distance(self, other):
        return abs(self.pos - other.pos)


class Everything(ForwardOnly):
    ops = IterOp.ADVANCE | IterOp.NEXT | IterOp.PREV | IterOp.INC | IterOp.DEC

    def copy(self):
        return Everything(self.pos)


class AdvanceAndInc(ForwardOnly):
    ops = IterOp(17)

    def copy(self):
        return AdvanceAndInc(self.pos)


def test_pre_inc_returns_previous_state():
    it = ForwardOnly(5)
    before = Iterator.pre_inc(it)
    assert before.pos == 5
    assert it.pos == 6


def test_post_inc_returns_new_state():
    it = ForwardOnly(5)
    after = Iterator.post_inc(it)
    assert after.pos == 6
    assert Iterator.__eq__(after, it)


def test_dec_variants():
    it = Everything(5)
    before = Iterator.pre_dec(it)
    assert before.pos == 5 and it.pos == 4
    after = Iterator.post_dec(it)
    assert after.pos == it.pos == 3


def test_next_and_prev_leave_original_untouched():
    it = Everything(10)
    assert Iterator.next(it, 3).pos == 13
    assert Iterator.prev(it, 4).pos == 6
    assert it.pos == 10


def test_advance_moves_in_place_both_ways():
    it = Everything(0)
    Iterator.advance(it, 7)
    Iterator.advance(it, -2)
    assert it.pos == 5


def test_unsupported_operations_raise():
    it = ForwardOnly(0)
    with pytest.raises(IteratorOperationError):
        Iterator.advance(it, 1)
    with pytest.raises(IteratorOperationError):
        Iterator.prev(it, 1)
    with pytest.raises(IteratorOperationError):
        Iterator.pre_dec(it)
    with pytest.raises(IteratorOperationError):
        Iterator.post_dec(it)
    assert it.pos == 0


def test_equality_follows_position():
    assert Iterator.__eq__(ForwardOnly(3), ForwardOnly(3)) is True
    assert Iterator.__eq__(ForwardOnly(3), ForwardOnly(4)) is False
    assert ForwardOnly(3) != ForwardOnly(4)


def test_copy_is_independent():
    it = Everything(1)
    dup = it.copy()
    Iterator.advance(dup, 5)
    assert it.pos == 1
    assert dup.pos == 6
    assert dup.distance(it) == 5 == it.distance(dup)


def test_abstract_base_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Iterator()


def test_flag_bits_select_allowed_operations():
    it = AdvanceAndInc(0)
    Iterator.advance(it, 4)
    Iterator.pre_inc(it)
    assert it.pos == 5
    with pytest.raises(IteratorOperationError):
        Iterator.next(it, 1)
    with pytest.raises(IteratorOperationError):
        Iterator.pre_dec(it)
    assert it.pos == 5