# This file is part of qcheck.
#
# Copyright the qcheck Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from qcheck.generator.core import Generator, Shrinkable, is_rejection


def generate_all(generators, random, size):
    """Generates one Shrinkable per generator, in order, or returns the
    first Rejected encountered."""
    result = []
    for g in generators:
        r = g.generate(random, size)
        if is_rejection(r):
            return r
        result.append(r)
    return tuple(result)


def replace_one(components):
    """Every way of replacing a single component by one of its candidates,
    from the leftmost component and its simplest candidate onwards."""
    for i, component in enumerate(components):
        for candidate in component.shrinks():
            yield components[:i] + (candidate,) + components[i + 1 :]


def remove_one(components):
    for i in range(len(components)):
        yield components[:i] + components[i + 1 :]


def tuple_shrinkable(components):
    return Shrinkable(
        tuple(c.value for c in components),
        lambda: (tuple_shrinkable(c) for c in replace_one(components)),
    )


def list_shrinkable(elements, shrink_elements):
    return Shrinkable(
        [e.value for e in elements],
        lambda: (
            list_shrinkable(c, shrink_elements) for c in shrink_elements(elements)
        ),
    )


def remove_then_replace(elements):
    yield from remove_one(elements)
    yield from replace_one(elements)


def remove_then_replace_unless_single(elements):
    if len(elements) > 1:
        yield from remove_then_replace(elements)


class TupleGenerator(Generator):
    """Tuples of independently generated components."""

    def __init__(self, element_generators):
        self.element_generators = tuple(element_generators)

    def generate(self, random, size):
        components = generate_all(self.element_generators, random, size)
        if is_rejection(components):
            return components
        return tuple_shrinkable(components)

    def __repr__(self):
        return "tuples(%s)" % (", ".join(map(repr, self.element_generators)),)


class ListGenerator(Generator):
    """Lists with a length drawn uniformly from [min_size, max(min_size,
    size)].

    A list shrinks by first dropping each element in turn and then by
    replacing each element in place with each of its own candidates. A
    non-empty list with a single element does not shrink at all.
    """

    def __init__(self, elements, min_size=0):
        self.elements = elements
        self.min_size = min_size

    def generate(self, random, size):
        length = random.randint(self.min_size, max(self.min_size, size))
        elements = generate_all((self.elements,) * length, random, size)
        if is_rejection(elements):
            return elements
        if self.min_size > 0:
            return list_shrinkable(elements, remove_then_replace_unless_single)
        return list_shrinkable(elements, remove_then_replace)

    def __repr__(self):
        if self.min_size > 0:
            return "non_empty_lists(%r)" % (self.elements,)
        return "lists(%r)" % (self.elements,)


class ArrayGenerator(Generator):
    """Lists of a fixed length, shrunk element by element in place."""

    def __init__(self, elements, length):
        self.elements = elements
        self.length = length

    def generate(self, random, size):
        elements = generate_all((self.elements,) * self.length, random, size)
        if is_rejection(elements):
            return elements
        return list_shrinkable(elements, replace_one)

    def __repr__(self):
        return "arrays(%r, %d)" % (self.elements, self.length)


class VectorGenerator(Generator):
    """Lists of a fixed length which never shrink."""

    def __init__(self, length, elements):
        self.length = length
        self.elements = elements

    def generate(self, random, size):
        elements = generate_all((self.elements,) * self.length, random, size)
        if is_rejection(elements):
            return elements
        return Shrinkable([e.value for e in elements])

    def __repr__(self):
        return "vectors(%d, %r)" % (self.length, self.elements)
