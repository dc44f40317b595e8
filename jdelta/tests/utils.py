# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from contextlib import contextmanager
import copy
import random

import pytest

from jdelta import apply_patch, diff
from jdelta.patch_format import is_valid_patch
from jdelta.utils import deep_equal


def check_diff_and_patch(a, b):
    "Check that apply_patch(a, diff(a,b)) reproduces b and leaves a untouched."
    snapshot = copy.deepcopy(a)
    d = diff(a, b)
    assert is_valid_patch(d)
    assert deep_equal(apply_patch(a, d), b)
    assert deep_equal(a, snapshot)


def check_symmetric_diff_and_patch(a, b):
    "Check that apply_patch(a, diff(a,b)) reproduces b and vice versa."
    check_diff_and_patch(a, b)
    check_diff_and_patch(b, a)


_keys = ["a", "b", "c", "a/b", "m~n", "", "~1", "0"]

_scalars = [None, True, False, 0, 1, -2, 3.5, "", "x", "hello/world", "~0"]


def random_value(rng, depth=3):
    """Generate a random json value with at most depth levels of nesting."""
    choice = rng.random()
    if depth <= 0 or choice < 0.4:
        return rng.choice(_scalars)
    if choice < 0.7:
        keys = rng.sample(_keys, rng.randint(0, 4))
        return {k: random_value(rng, depth - 1) for k in keys}
    return [random_value(rng, depth - 1) for _ in range(rng.randint(0, 3))]


def random_pairs(n, seed=0):
    rng = random.Random(seed)
    for _ in range(n):
        yield random_value(rng), random_value(rng)


@contextmanager
def assert_clean_exit():
    """Assert that SystemExit is called with code=0"""
    with pytest.raises(SystemExit) as e:
        yield
    assert e.value.code == 0
