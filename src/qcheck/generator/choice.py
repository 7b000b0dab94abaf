# This file is part of qcheck.
#
# Copyright the qcheck Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from bisect import bisect_left

from qcheck.generator.core import Generator, Rejected, Shrinkable, is_rejection


class OneOfGenerator(Generator):
    """Implements a union of generators. Each value comes from a branch
    chosen uniformly at random, and shrinks the way that branch shrinks."""

    def __init__(self, generators):
        flattened = []
        for g in generators:
            if isinstance(g, OneOfGenerator):
                flattened.extend(g.element_generators)
            else:
                flattened.append(g)
        self.element_generators = tuple(flattened)

    def generate(self, random, size):
        branch = random.randrange(len(self.element_generators))
        return self.element_generators[branch].generate(random, size)

    def __repr__(self):
        return " | ".join(map(repr, self.element_generators))


class FrequencyGenerator(Generator):
    """Chooses a branch with probability proportional to its weight.

    A uniform draw in [1, total] selects the first branch whose cumulative
    weight is at least the draw, so a branch of weight zero can never be
    chosen.
    """

    def __init__(self, weighted):
        self.weighted = tuple(weighted)
        self.element_generators = []
        self.cumulative = []
        total = 0
        for weight, g in self.weighted:
            if weight > 0:
                total += weight
                self.cumulative.append(total)
                self.element_generators.append(g)
        self.total = total

    def generate(self, random, size):
        draw = random.randint(1, self.total)
        branch = bisect_left(self.cumulative, draw)
        return self.element_generators[branch].generate(random, size)

    def __repr__(self):
        return "frequency(%s)" % (
            ", ".join("(%d, %r)" % pair for pair in self.weighted),
        )


class ElementsGenerator(Generator):
    """A uniformly chosen member of a fixed sequence. Each value shrinks to
    the members listed before it."""

    def __init__(self, values):
        self.values = tuple(values)

    def element(self, i):
        return Shrinkable(
            self.values[i], lambda: (self.element(j) for j in range(i))
        )

    def generate(self, random, size):
        return self.element(random.randrange(len(self.values)))

    def __repr__(self):
        return "elements(%s)" % (", ".join(map(repr, self.values)),)


class ChainGenerator(Generator):
    """Takes the value of the first generator that produces one."""

    def __init__(self, generators):
        self.element_generators = tuple(generators)

    def generate(self, random, size):
        for g in self.element_generators:
            result = g.generate(random, size)
            if not is_rejection(result):
                return result
        return Rejected("every generator in the chain was rejected", exhausted=True)

    def __repr__(self):
        return "chain(%s)" % (", ".join(map(repr, self.element_generators)),)


class FixedGenerator(Generator):
    """Replays a fixed series of values, each once per run, and is then
    exhausted. The position in the series is kept on the random source so
    that every run starts again from the first value."""

    def __init__(self, values):
        self.values = tuple(values)

    def generate(self, random, size):
        position = random.run_state(self, lambda: [0])
        if position[0] >= len(self.values):
            return Rejected("all fixed values have been used", exhausted=True)
        value = self.values[position[0]]
        position[0] += 1
        return Shrinkable(value)

    def __repr__(self):
        return "fixed(%s)" % (", ".join(map(repr, self.values)),)
