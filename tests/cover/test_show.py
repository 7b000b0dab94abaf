# This file is part of qcheck.
#
# Copyright the qcheck Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from collections import namedtuple

import pytest

from qcheck.utils.show import show


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, "True"),
        (-3, "-3"),
        ("a\nb", "'a\\nb'"),
        (b"ab", "b'ab'"),
        (int, "int"),
        (1.5, "1.5"),
        (float("nan"), "float('nan')"),
        (float("-inf"), "float('-inf')"),
        ([1, "a"], "[1, 'a']"),
        ((1,), "(1,)"),
        ((1, 2), "(1, 2)"),
        ({2, 1}, "{1, 2}"),
        (set(), "set()"),
        (frozenset([1]), "frozenset({1})"),
        ({1: [2]}, "{1: [2]}"),
        (object(), "object()"),
    ],
    ids=repr,
)
def test_shows_values_as_literals(value, expected):
    assert show(value) == expected


def test_shows_named_tuples_with_field_names():
    Point = namedtuple("Point", ("x", "y"))
    assert show(Point(1, [2])) == "Point(x=1, y=[2])"


def test_shows_functions_by_name():
    def is_even(x):
        return x % 2 == 0

    assert show(is_even) == "is_even"


def test_recursive_values_are_cut_short():
    xs = [1]
    xs.append(xs)
    assert show(xs) == "[1, (...)]"


def test_repeated_values_are_not_recursion():
    x = [1]
    assert show([x, x]) == "[[1], [1]]"


def test_falls_back_to_repr():
    class Thing:
        def __repr__(self):
            return "Thing!"

    assert show(Thing()) == "Thing!"
