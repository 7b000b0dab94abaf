# This file is part of qcheck.
#
# Copyright the qcheck Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Looking at what a generator produces, for debugging generators.

Values are drawn at sizes 0, 1, 2, ... and sampling stops early if the
generator rejects.
"""

import sys
from itertools import islice

from qcheck.arbitrary import arbitrary
from qcheck.generator.core import is_rejection
from qcheck.internal.entropy import new_random
from qcheck.internal.validation import check_valid_size
from qcheck.utils.show import show

DEFAULT_SAMPLES = 20


def samples(generator, num, seed):
    check_valid_size(num, "num")
    generator = arbitrary(generator)
    random = new_random(seed)
    for size in range(num or DEFAULT_SAMPLES):
        result = generator.generate(random, size)
        if is_rejection(result):
            return
        yield random, result


def sample(generator, num=DEFAULT_SAMPLES, seed=None):
    """Returns a list of up to num values from generator."""
    return [s.value for _, s in samples(generator, num, seed)]


def sample_shrink(generator, num=DEFAULT_SAMPLES, seed=None):
    """Returns a list of up to num (value, candidates) pairs from
    generator."""
    return [
        (s.value, [c.value for c in s.shrinks()])
        for _, s in samples(generator, num, seed)
    ]


def sample_output(generator, out=None, num=DEFAULT_SAMPLES, seed=None):
    """Writes up to num values from generator to out on a single line."""
    if out is None:
        out = sys.stdout
    out.write(" ".join(show(s.value) for _, s in samples(generator, num, seed)))
    out.write("\n")


def sample_shrink_output(
    generator, out=None, num=DEFAULT_SAMPLES, randomized=False, seed=None
):
    """Writes a line ``value -> c1 c2 ...`` for each of up to num values from
    generator, listing at most num of its candidates. With randomized the
    candidates are shuffled first, so that later ones get shown too."""
    if out is None:
        out = sys.stdout
    limit = num or DEFAULT_SAMPLES
    for random, s in samples(generator, num, seed):
        if randomized:
            candidates = s.shrink()
            random.shuffle(candidates)
            candidates = candidates[:limit]
        else:
            candidates = list(islice(s.shrinks(), limit))
        line = show(s.value) + " ->"
        for c in candidates:
            line += " " + show(c.value)
        out.write(line + "\n")
