# This file is part of qcheck.
#
# Copyright the qcheck Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""The core abstractions every generator is built from.

A generator turns a random source and a size into a :class:`Shrinkable`:
the generated value together with a way of asking for simpler versions of
it. Anything a generator needs to remember in order to shrink its value
(which branch was taken, which component values went into it) is captured
in that continuation, so generators themselves carry no mutable state and
may be shared freely.

When a generator cannot produce a value it returns a :class:`Rejected`
instead, which combinators pass straight through to the caller.
"""

import attr

from qcheck.internal.reflection import get_pretty_function_description


@attr.s(slots=True, frozen=True)
class Rejected:
    """The outcome of a generation attempt that produced no value.

    ``exhausted`` distinguishes a generator which has run out of values
    from one whose value merely failed a predicate; the runner treats both
    as a discarded trial.
    """

    reason = attr.ib(default="")
    exhausted = attr.ib(default=False)


def is_rejection(result):
    return isinstance(result, Rejected)


def no_shrinks():
    return ()


@attr.s(slots=True, frozen=True, eq=False, repr=False)
class Shrinkable:
    """A generated value together with the thunk that yields its simpler
    candidates, each of which is again a Shrinkable.

    Candidates are produced lazily, so a shrinker that stops at the first
    interesting one never pays for the rest.
    """

    value = attr.ib()
    shrinks = attr.ib(default=no_shrinks)

    def shrink(self):
        return list(self.shrinks())

    def map(self, f):
        shrinks = self.shrinks
        return Shrinkable(f(self.value), lambda: (c.map(f) for c in shrinks()))

    def filter(self, condition):
        shrinks = self.shrinks
        return Shrinkable(
            self.value,
            lambda: (c.filter(condition) for c in shrinks() if condition(c.value)),
        )

    def without_shrinks(self):
        return Shrinkable(self.value)

    def __repr__(self):
        return "Shrinkable(%r)" % (self.value,)


class Generator:
    """A Generator is an object that knows how to produce values of some
    type, at a given size, along with their simpler candidates.

    Subclasses implement :meth:`generate`.
    """

    def generate(self, random, size):
        """Returns a Shrinkable drawn from random at the given size, or a
        Rejected if no value could be produced."""
        raise NotImplementedError("%s.generate" % (type(self).__name__,))

    def map(self, pack):
        """Returns a new generator that generates values by passing values
        from this generator through pack. Candidates are those of the
        original value, passed through pack in turn."""
        from qcheck.generator.mapped import MappedGenerator

        return MappedGenerator(pack, (self,))

    def filter(self, condition):
        """Returns a new generator whose values all satisfy condition.

        Values which fail it make the trial a discard.
        """
        from qcheck.generator.mapped import FilteredGenerator

        return FilteredGenerator(self, condition)

    def __or__(self, other):
        if not isinstance(other, Generator):
            raise ValueError("Cannot | a Generator with %r" % (other,))
        from qcheck.generator.choice import OneOfGenerator

        return OneOfGenerator((self, other))

    def __repr__(self):
        return "%s()" % (type(self).__name__,)


class StatelessGenerator(Generator):
    """A generator whose candidates depend only on the value being shrunk.

    Subclasses implement :meth:`do_generate` to produce a plain value (or a
    Rejected) and may override :meth:`shrink`, which is applied again to
    every candidate it returns.
    """

    def do_generate(self, random, size):
        raise NotImplementedError("%s.do_generate" % (type(self).__name__,))

    def shrink(self, value):
        return ()

    def shrinkable(self, value):
        return Shrinkable(
            value, lambda: (self.shrinkable(v) for v in self.shrink(value))
        )

    def generate(self, random, size):
        value = self.do_generate(random, size)
        if is_rejection(value):
            return value
        return self.shrinkable(value)


class FunctionGenerator(StatelessGenerator):
    """A stateless generator described by a pair of functions: produce,
    called as produce(random, size), and shrink, called as shrink(value)
    and returning an iterable of candidates."""

    def __init__(self, produce, shrink=None):
        self.produce = produce
        self.shrinker = shrink

    def do_generate(self, random, size):
        return self.produce(random, size)

    def shrink(self, value):
        if self.shrinker is None:
            return ()
        return self.shrinker(value)

    def __repr__(self):
        if self.shrinker is None:
            return "stateless(%s)" % (get_pretty_function_description(self.produce),)
        return "stateless(%s, %s)" % (
            get_pretty_function_description(self.produce),
            get_pretty_function_description(self.shrinker),
        )
