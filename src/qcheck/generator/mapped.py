# This file is part of qcheck.
#
# Copyright the qcheck Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from qcheck.generator.collections import generate_all, tuple_shrinkable
from qcheck.generator.core import Generator, Rejected, Shrinkable, is_rejection
from qcheck.internal.reflection import get_pretty_function_description


class MappedGenerator(Generator):
    """A generator which applies pack to values drawn from one or more
    underlying generators.

    The source values travel with each result, so candidates are the
    candidates of one source value at a time, passed through pack again.
    """

    def __init__(self, pack, generators):
        self.pack = pack
        self.generators = tuple(generators)

    def generate(self, random, size):
        if len(self.generators) == 1:
            source = self.generators[0].generate(random, size)
            if is_rejection(source):
                return source
            return source.map(self.pack)
        components = generate_all(self.generators, random, size)
        if is_rejection(components):
            return components
        pack = self.pack
        return tuple_shrinkable(components).map(lambda args: pack(*args))

    def __repr__(self):
        if len(self.generators) == 1:
            return "%r.map(%s)" % (
                self.generators[0],
                get_pretty_function_description(self.pack),
            )
        return "combine(%s, %s)" % (
            get_pretty_function_description(self.pack),
            ", ".join(map(repr, self.generators)),
        )


class FilteredGenerator(Generator):
    """Values of the underlying generator which satisfy condition. Values
    that do not are rejected, and candidates that do not are skipped."""

    def __init__(self, generator, condition):
        self.generator = generator
        self.condition = condition

    def generate(self, random, size):
        result = self.generator.generate(random, size)
        if is_rejection(result):
            return result
        if not self.condition(result.value):
            return Rejected(
                "%r does not satisfy %s"
                % (result.value, get_pretty_function_description(self.condition))
            )
        return result.filter(self.condition)

    def __repr__(self):
        return "%r.filter(%s)" % (
            self.generator,
            get_pretty_function_description(self.condition),
        )


class SizedGenerator(Generator):
    """Builds the generator to use from the current size on every call."""

    def __init__(self, factory):
        self.factory = factory

    def generate(self, random, size):
        from qcheck.arbitrary import arbitrary

        return arbitrary(self.factory(size)).generate(random, size)

    def __repr__(self):
        return "sized(%s)" % (get_pretty_function_description(self.factory),)


class ResizedGenerator(Generator):
    """Runs the underlying generator at a fixed size."""

    def __init__(self, size, generator):
        self.size = size
        self.generator = generator

    def generate(self, random, size):
        return self.generator.generate(random, self.size)

    def __repr__(self):
        return "resize(%d, %r)" % (self.size, self.generator)


class NoShrinkGenerator(Generator):
    def __init__(self, generator):
        self.generator = generator

    def generate(self, random, size):
        result = self.generator.generate(random, size)
        if is_rejection(result):
            return result
        return result.without_shrinks()

    def __repr__(self):
        return "no_shrink(%r)" % (self.generator,)


class JustGenerator(Generator):
    def __init__(self, value):
        self.value = value

    def generate(self, random, size):
        return Shrinkable(self.value)

    def __repr__(self):
        return "just(%r)" % (self.value,)
