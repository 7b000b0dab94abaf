# This file is part of qcheck.
#
# Copyright the qcheck Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import math

# exp(POISSON_STEP) is still comfortably representable as a float, so a
# uniform draw multiplied by it never overflows.
POISSON_STEP = 500


def poisson(random, rate):
    """Generate a Poisson distributed integer with mean rate.

    This is Knuth's multiplication method, with exp(-rate) applied in
    chunks so that it never underflows for large rates.
    """
    remaining = rate
    k = 0
    p = 1.0
    while True:
        k += 1
        p *= random.random()
        while p < 1.0 and remaining > 0:
            if remaining > POISSON_STEP:
                p *= math.exp(POISSON_STEP)
                remaining -= POISSON_STEP
            else:
                p *= math.exp(remaining)
                remaining = 0
        if p <= 1.0:
            return k - 1


def fair_coin(random):
    return random.random() < 0.5


def uniform_float(random, lower, upper):
    return random.uniform(lower, upper)
