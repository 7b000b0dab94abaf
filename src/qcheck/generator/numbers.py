# This file is part of qcheck.
#
# Copyright the qcheck Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import math

from qcheck.generator.core import StatelessGenerator
from qcheck.internal.distributions import fair_coin, poisson, uniform_float


def halve_towards_zero(n):
    if n < 0:
        return -(-n // 2)
    return n // 2


def shrink_integral(x, min_value=None, max_value=None):
    """Candidates for x, simplest first.

    A negative value first offers its absolute value (or the maximum, when
    the absolute value of the type's minimum does not fit), then the values
    x - x, x - x/2, x - x/4, ... which start at zero and close in on x.
    """
    result = []
    if x < 0:
        if min_value is not None and x == min_value:
            result.append(max_value)
        else:
            result.append(-x)
    n = x
    while n != 0:
        result.append(x - n)
        n = halve_towards_zero(n)
    return result


class IntegralGenerator(StatelessGenerator):
    """Integers with a Poisson distributed magnitude whose mean is the size,
    negated half the time for signed types and clamped to the bounds of
    fixed-width ones."""

    def __init__(self, min_value=None, max_value=None, name="int"):
        self.min_value = min_value
        self.max_value = max_value
        self.name = name

    @property
    def signed(self):
        return self.min_value is None or self.min_value < 0

    def do_generate(self, random, size):
        value = poisson(random, max(size, 1))
        if self.signed and fair_coin(random):
            value = -value
        if self.min_value is not None:
            value = max(value, self.min_value)
        if self.max_value is not None:
            value = min(value, self.max_value)
        return value

    def shrink(self, value):
        return shrink_integral(value, self.min_value, self.max_value)

    def __repr__(self):
        return "arbitrary(%s)" % (self.name,)


def shrink_real(x):
    if math.isnan(x):
        return [0.0]
    if x == 0:
        return []
    result = []
    if x < 0:
        result.append(-x)
    result.append(0.0)
    if math.isfinite(x) and abs(x) >= 2:
        result.append(x / 2)
    return result


class RealGenerator(StatelessGenerator):
    """Floats drawn uniformly from [-(size + 1), size + 1]."""

    def do_generate(self, random, size):
        bound = float(size + 1)
        return uniform_float(random, -bound, bound)

    def shrink(self, value):
        return shrink_real(value)

    def __repr__(self):
        return "arbitrary(float)"


class BooleanGenerator(StatelessGenerator):
    def do_generate(self, random, size):
        return fair_coin(random)

    def shrink(self, value):
        if value:
            return [False]
        return []

    def __repr__(self):
        return "arbitrary(bool)"


class ChooseGenerator(StatelessGenerator):
    """Integers uniform in the closed interval [min_value, max_value].

    Candidates walk from whichever bound lies nearer zero towards the value.
    """

    def __init__(self, min_value, max_value):
        self.min_value = min_value
        self.max_value = max_value

    def do_generate(self, random, size):
        return random.randint(self.min_value, self.max_value)

    def shrink(self, value):
        if abs(self.min_value) <= abs(self.max_value):
            return range(self.min_value, value)
        return range(self.max_value, value, -1)

    def __repr__(self):
        return "choose(%d, %d)" % (self.min_value, self.max_value)
