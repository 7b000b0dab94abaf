# This file is part of qcheck.
#
# Copyright the qcheck Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""The combinators for building generators.

Anywhere a generator is expected a descriptor may be passed instead (see
:mod:`qcheck.arbitrary`), and is replaced by its default generator.
"""

from qcheck.arbitrary import arbitrary
from qcheck.errors import InvalidArgument
from qcheck.generator.choice import (
    ChainGenerator,
    ElementsGenerator,
    FixedGenerator,
    FrequencyGenerator,
    OneOfGenerator,
)
from qcheck.generator.collections import (
    ArrayGenerator,
    ListGenerator,
    TupleGenerator,
    VectorGenerator,
)
from qcheck.generator.core import FunctionGenerator
from qcheck.generator.mapped import (
    FilteredGenerator,
    JustGenerator,
    MappedGenerator,
    NoShrinkGenerator,
    ResizedGenerator,
    SizedGenerator,
)
from qcheck.generator.numbers import ChooseGenerator
from qcheck.generator.text import StringGenerator
from qcheck.internal.validation import (
    check_type,
    check_valid_integer,
    check_valid_interval,
    check_valid_size,
)

__all__ = [
    "arrays",
    "chain",
    "choose",
    "combine",
    "convert",
    "elements",
    "fixed",
    "frequency",
    "just",
    "lists",
    "no_shrink",
    "non_empty_lists",
    "one_of",
    "resize",
    "sized",
    "stateless",
    "strings",
    "such_that",
    "tuples",
    "vectors",
]


def check_callable(f, name):
    if not callable(f):
        raise InvalidArgument("Expected a callable but got %s=%r" % (name, f))


def choose(min_value, max_value):
    """Integers uniformly distributed in the closed interval [min_value,
    max_value].

    Values shrink towards whichever bound is closer to zero.
    """
    check_valid_integer(min_value, "min_value")
    check_valid_integer(max_value, "max_value")
    if min_value is None or max_value is None:
        raise InvalidArgument("choose() needs both min_value and max_value")
    check_valid_interval(min_value, max_value, "min_value", "max_value")
    return ChooseGenerator(min_value, max_value)


def elements(*values):
    """A uniformly chosen member of values. A single list or tuple argument
    is taken as the sequence of members.

    A value shrinks to the members given before it, so put the simplest
    first.
    """
    if len(values) == 1 and isinstance(values[0], (list, tuple)):
        values = values[0]
    if not values:
        raise InvalidArgument("elements() needs at least one value")
    return ElementsGenerator(values)


def one_of(*generators):
    """Values from a branch chosen uniformly at random. Shrinking stays
    within the branch that produced the value."""
    if len(generators) == 1 and isinstance(generators[0], (list, tuple)):
        generators = generators[0]
    if not generators:
        raise InvalidArgument("one_of() needs at least one generator")
    return OneOfGenerator(arbitrary(g) for g in generators)


def frequency(*weighted):
    """Values from a branch chosen with probability proportional to its
    weight. Each argument is a (weight, generator) pair with a non-negative
    integer weight; a weight of zero disables the branch.
    """
    if len(weighted) == 1 and isinstance(weighted[0], list):
        weighted = weighted[0]
    pairs = []
    for i, pair in enumerate(weighted):
        check_type(tuple, pair, "weighted[%d]" % (i,))
        if len(pair) != 2:
            raise InvalidArgument(
                "Expected a (weight, generator) pair but got weighted[%d]=%r"
                % (i, pair)
            )
        weight, g = pair
        check_type(int, weight, "weight")
        check_valid_size(weight, "weight")
        pairs.append((weight, arbitrary(g)))
    if sum(weight for weight, _ in pairs) == 0:
        raise InvalidArgument(
            "frequency() needs at least one branch with a positive weight"
        )
    return FrequencyGenerator(pairs)


def such_that(generator, condition):
    """Values of generator that satisfy condition. A value which fails it
    discards the trial, and shrinking never leaves the condition."""
    check_callable(condition, "condition")
    return FilteredGenerator(arbitrary(generator), condition)


def lists(elements):
    """Lists of up to size values drawn from elements.

    A list shrinks by removing one element, and then by shrinking one
    element in place.
    """
    return ListGenerator(arbitrary(elements))


def non_empty_lists(elements):
    """Like :func:`lists`, but never empty."""
    return ListGenerator(arbitrary(elements), min_size=1)


def arrays(elements, length):
    """Lists of exactly length values, which only shrink element-wise."""
    check_type(int, length, "length")
    check_valid_size(length, "length")
    return ArrayGenerator(arbitrary(elements), length)


def vectors(length, elements):
    """Lists of exactly length values, which never shrink."""
    check_type(int, length, "length")
    check_valid_size(length, "length")
    return VectorGenerator(length, arbitrary(elements))


def tuples(*generators):
    """Tuples of independently generated components. Each candidate shrinks
    exactly one component."""
    return TupleGenerator(arbitrary(g) for g in generators)


def strings(characters=None):
    """Strings of up to size characters, drawn from characters if given."""
    if characters is None:
        return arbitrary(str)
    return StringGenerator(arbitrary(characters))


def sized(factory):
    """A generator which calls factory(size) on every generation and uses
    the generator it returns."""
    check_callable(factory, "factory")
    return SizedGenerator(factory)


def resize(size, generator):
    """generator, always run at the given size."""
    check_type(int, size, "size")
    check_valid_size(size, "size")
    return ResizedGenerator(size, arbitrary(generator))


def convert(pack, generator):
    """Values of generator passed through pack."""
    check_callable(pack, "pack")
    return MappedGenerator(pack, (arbitrary(generator),))


def combine(pack, *generators):
    """pack(*args) for args drawn from each generator in turn."""
    check_callable(pack, "pack")
    if not generators:
        raise InvalidArgument("combine() needs at least one generator")
    return MappedGenerator(pack, tuple(arbitrary(g) for g in generators))


def chain(*generators):
    """The value of the first generator which does not reject."""
    if not generators:
        raise InvalidArgument("chain() needs at least one generator")
    return ChainGenerator(arbitrary(g) for g in generators)


def fixed(*values):
    """Each of values once per run, in order. After that every trial is
    discarded."""
    return FixedGenerator(values)


def no_shrink(generator):
    """generator, but its values never shrink."""
    return NoShrinkGenerator(arbitrary(generator))


def just(value):
    """Always value, which never shrinks."""
    return JustGenerator(value)


def stateless(produce, shrink=None):
    """A generator from a pair of functions: produce(random, size) returns a
    value and shrink(value) returns its candidates, simplest first."""
    check_callable(produce, "produce")
    if shrink is not None:
        check_callable(shrink, "shrink")
    return FunctionGenerator(produce, shrink)
