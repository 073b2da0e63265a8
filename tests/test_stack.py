import pytest

from latte.errors import StackUnderflow, VMError
from latte.stack import Stack


def test_pop_is_last_in_first_out():
    stack = Stack()
    for value in (10, 20, 30):
        stack.push(value)
    assert [stack.pop(), stack.pop(), stack.pop()] == [30, 20, 10]


def test_pop_empty_raises():
    with pytest.raises(StackUnderflow):
        Stack().pop()


def test_underflow_is_vm_error():
    with pytest.raises(VMError):
        Stack().pop()


def test_dup_copies_top():
    stack = Stack([1, 9])
    stack.dup()
    assert len(stack) == 3
    assert stack.pop() == 9
    assert stack.pop() == 9
    assert stack.pop() == 1


def test_dup_empty_raises():
    stack = Stack()
    with pytest.raises(StackUnderflow):
        stack.dup()
    assert len(stack) == 0


def test_len_tracks_pushes_and_pops():
    stack = Stack()
    stack.push(4)
    stack.push(5)
    assert len(stack) == 2
    stack.pop()
    assert len(stack) == 1


def test_initial_values_are_copied():
    values = [1, 2]
    stack = Stack(values)
    stack.push(3)
    assert values == [1, 2]
    assert stack.pop() == 3