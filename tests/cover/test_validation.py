# This file is part of qcheck.
#
# Copyright the qcheck Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import pytest

from qcheck import generators as g
from qcheck.errors import InvalidArgument


def fn(*args):
    return args


@pytest.mark.parametrize(
    "make",
    [
        lambda: g.choose(1, None),
        lambda: g.choose(1.5, 2),
        lambda: g.choose(True, 2),
        lambda: g.choose(3, 2),
        lambda: g.elements(),
        lambda: g.one_of(),
        lambda: g.one_of(object()),
        lambda: g.frequency(),
        lambda: g.frequency((0, int)),
        lambda: g.frequency((-1, int), (1, int)),
        lambda: g.frequency((1.5, int)),
        lambda: g.frequency((1, int, 2)),
        lambda: g.frequency([1, int]),
        lambda: g.such_that(int, "not callable"),
        lambda: g.lists(object()),
        lambda: g.arrays(int, -1),
        lambda: g.arrays(int, None),
        lambda: g.vectors(None, int),
        lambda: g.resize(-1, int),
        lambda: g.sized(3),
        lambda: g.convert(3, int),
        lambda: g.combine(fn),
        lambda: g.chain(),
        lambda: g.stateless(3),
        lambda: g.stateless(fn, 3),
    ],
)
def test_rejects_invalid_arguments(make):
    with pytest.raises(InvalidArgument):
        make()


@pytest.mark.parametrize(
    "make",
    [
        lambda: g.choose(0, 0),
        lambda: g.elements(1),
        lambda: g.one_of(int, [bool]),
        lambda: g.frequency((0, int), (1, bool)),
        lambda: g.frequency([(1, int)]),
        lambda: g.arrays(int, 0),
        lambda: g.vectors(0, int),
        lambda: g.resize(0, int),
        lambda: g.combine(fn, int, str),
        lambda: g.fixed(),
        lambda: g.strings(),
    ],
)
def test_accepts_valid_arguments(make):
    make()
