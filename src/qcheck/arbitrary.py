# This file is part of qcheck.
#
# Copyright the qcheck Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""The registry of default generators, keyed by descriptor.

A descriptor is anything that names a kind of value: a builtin type such
as ``int`` or ``str``, one of the descriptors in :mod:`qcheck.types`, a
one-element list such as ``[int]`` for lists of that element, a tuple of
descriptors for tuples, or a ``list[...]``/``tuple[...]`` generic alias.
Generators are descriptors for themselves.

Looking up a descriptor with nothing registered for it raises
:class:`~qcheck.errors.MissingArbitrary` straight away, so a property over
an unsupported type fails when it is defined rather than when it runs.
"""

import typing

from qcheck.errors import InvalidArgument, MissingArbitrary
from qcheck.generator.choice import OneOfGenerator
from qcheck.generator.collections import ArrayGenerator, ListGenerator, TupleGenerator
from qcheck.generator.core import FunctionGenerator, Generator
from qcheck.generator.numbers import BooleanGenerator, IntegralGenerator, RealGenerator
from qcheck.generator.text import CharacterGenerator, StringGenerator
from qcheck.internal.specmapper import SpecificationMapper, next_in_chain
from qcheck.types import Array, CharacterType, IntegralType, char


def convert_generator(fn):
    if isinstance(fn, Generator):
        return lambda arbitraries, descriptor: fn
    return fn


def arbitrary_for(descriptor):
    """Decorator registering fn(table, descriptor) as the way to build the
    default generator for descriptor. fn may also simply be a generator."""

    def accept_function(fn):
        ArbitraryTable.default().define_specification_for(
            descriptor, convert_generator(fn)
        )
        return fn

    return accept_function


def arbitrary_for_instances(cls):
    def accept_function(fn):
        ArbitraryTable.default().define_specification_for_instances(
            cls, convert_generator(fn)
        )
        return fn

    return accept_function


def register_arbitrary(descriptor, generator):
    """Registers generator as the default for descriptor.

    generator may be a Generator or a pair of functions (produce, shrink)
    with the signatures of :func:`qcheck.generators.stateless`.
    """
    if isinstance(generator, tuple):
        generator = FunctionGenerator(*generator)
    if not isinstance(generator, Generator):
        raise InvalidArgument(
            "Expected a Generator or a (produce, shrink) pair but got %r"
            % (generator,)
        )
    arbitrary_for(descriptor)(generator)


class ArbitraryTable(SpecificationMapper):
    def arbitrary(self, descriptor):
        return self.specification_for(descriptor)

    def missing_specification(self, descriptor):
        raise MissingArbitrary(descriptor)


def arbitrary(descriptor):
    """Returns the default generator for descriptor."""
    return ArbitraryTable.default().arbitrary(descriptor)


@arbitrary_for_instances(Generator)
def define_generator_arbitrary(arbitraries, descriptor):
    return descriptor


arbitrary_for(bool)(BooleanGenerator())
arbitrary_for(int)(IntegralGenerator())
arbitrary_for(float)(RealGenerator())


@arbitrary_for_instances(IntegralType)
def define_integral_arbitrary(arbitraries, descriptor):
    return IntegralGenerator(
        descriptor.min_value, descriptor.max_value, descriptor.name
    )


@arbitrary_for_instances(CharacterType)
def define_character_arbitrary(arbitraries, descriptor):
    return CharacterGenerator()


@arbitrary_for(str)
def define_string_arbitrary(arbitraries, descriptor):
    return StringGenerator(arbitraries.arbitrary(char))


@arbitrary_for_instances(list)
def define_list_arbitrary(arbitraries, descriptor):
    if len(descriptor) != 1:
        raise InvalidArgument(
            "A list descriptor must contain exactly one element descriptor, "
            "but got %r" % (descriptor,)
        )
    return ListGenerator(arbitraries.arbitrary(descriptor[0]))


@arbitrary_for_instances(tuple)
def define_tuple_arbitrary(arbitraries, descriptor):
    return TupleGenerator(arbitraries.arbitrary(d) for d in descriptor)


@arbitrary_for_instances(Array)
def define_array_arbitrary(arbitraries, descriptor):
    return ArrayGenerator(arbitraries.arbitrary(descriptor.element), descriptor.length)


@arbitrary_for_instances(object)
def define_generic_alias_arbitrary(arbitraries, descriptor):
    origin = typing.get_origin(descriptor)
    args = typing.get_args(descriptor)
    if origin is list and len(args) == 1:
        return arbitraries.arbitrary([args[0]])
    if origin is tuple and args and Ellipsis not in args:
        return arbitraries.arbitrary(tuple(args))
    if origin is typing.Union:
        return OneOfGenerator(arbitraries.arbitrary(a) for a in args)
    next_in_chain()
