import dataclasses

import pytest

from engine2d.pair import Pair


def test_fields():
    pair = Pair("name", 7)
    assert pair.key == "name"
    assert pair.value == 7


def test_swap_exchanges_key_and_value():
    pair = Pair("name", 7)
    swapped = pair.swap()
    assert swapped.key == pair.value
    assert swapped.value == pair.key


def test_swap_twice_is_identity():
    pair = Pair(1, "one")
    assert pair.swap().swap() == pair


def test_equality_and_inequality():
    assert Pair("a", 1) == Pair("a", 1)
    assert Pair("a", 1) != Pair("a", 2)
    assert Pair("a", 1) != Pair("b", 1)


def test_pair_is_immutable():
    pair = Pair("a", 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        pair.key = "b"
    assert pair.key == "a"
    assert pair == Pair("a", 1)


def test_pair_is_hashable():
    assert len({Pair("a", 1), Pair("a", 1), Pair("b", 2)}) == 2