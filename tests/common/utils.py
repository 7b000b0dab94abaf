# This file is part of qcheck.
#
# Copyright the qcheck Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import contextlib
import sys
from io import StringIO

from qcheck.core import quick_check, quick_check_output
from qcheck.generator.core import is_rejection
from qcheck.internal.entropy import RandomSource
from qcheck.property import Property
from qcheck.reporting import default, with_reporter


@contextlib.contextmanager
def capture_out():
    old_out = sys.stdout
    try:
        new_out = StringIO()
        sys.stdout = new_out
        with with_reporter(default):
            yield new_out
    finally:
        sys.stdout = old_out


def run_with_output(prop, **kwargs):
    """Runs prop and returns the result together with everything that was
    written about it."""
    out = StringIO()
    result = quick_check_output(prop, out, **kwargs)
    return result, out.getvalue()


def draw(generator, seed=0, size=10):
    """A single Shrinkable from generator, failing the test on rejection."""
    result = generator.generate(RandomSource(seed), size)
    assert not is_rejection(result), result
    return result


def draws(generator, n=100, seed=0, size=10):
    random = RandomSource(seed)
    results = []
    for _ in range(n):
        result = generator.generate(random, size)
        if not is_rejection(result):
            results.append(result)
    return results


def minimal(generator, condition=lambda x: True, seed=0, max_success=200):
    """The input that a check failing exactly when condition holds gets
    shrunk to."""
    prop = Property(generator, check=lambda x: not condition(x))
    result = quick_check(
        prop, max_success=max_success, seed=seed, shrink_timeout=None
    )
    assert result.failing_input is not None, "no value satisfied condition"
    return result.failing_input[0]


def shrink_to_exhaustion(shrinkable):
    """Follows the largest batch of candidates at every step and returns the
    number of steps taken and the largest batch seen. Fails if that does not
    come to an end."""
    rounds = 0
    largest = 0
    current = shrinkable
    while True:
        candidates = current.shrink()
        if not candidates:
            return rounds, largest
        largest = max(largest, len(candidates))
        current = max(candidates, key=lambda c: len(c.shrink()))
        rounds += 1
        assert rounds < 5000, "shrinking did not terminate"
