# This file is part of qcheck.
#
# Copyright the qcheck Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Properties: a check over the values of one or more generators."""

from qcheck.arbitrary import arbitrary
from qcheck.errors import InvalidArgument
from qcheck.generator.collections import TupleGenerator

DEFAULT_NAME = "no-name"


class Property:
    """A property of the values drawn from some generators.

    A property can be built directly::

        Property([int], check=lambda xs: sorted(sorted(xs)) == sorted(xs))

    or by subclassing, setting ``generators`` and overriding :meth:`check`
    and, optionally, :meth:`classify` and :meth:`trivial`::

        class ReverseTwice(Property):
            generators = ([int],)
            name = "reversing a list twice yields the original list"

            def check(self, xs):
                return list(reversed(list(reversed(xs)))) == xs

    Generators may be given as descriptors, which are resolved when the
    property is created.

    ``check`` is called with one argument per generator. It fails the
    property by returning False (or anything else falsy except None) or by
    raising. Returning None passes, so assertion-style checks work.
    ``classify`` returns a label (an empty label counts as none) and
    ``trivial`` whether an input is uninteresting; both feed the summary.
    When ``expect`` is False the property is expected to fail.
    """

    generators = ()
    name = DEFAULT_NAME
    expect = True

    def __init__(
        self,
        *generators,
        check=None,
        classify=None,
        trivial=None,
        name=None,
        expect=None,
    ):
        if generators:
            self.generators = generators
        if not self.generators:
            raise InvalidArgument("A property needs at least one generator")
        if check is not None:
            self.check = check
        elif type(self).check is Property.check:
            raise InvalidArgument(
                "A property needs a check, either as check=... or by overriding "
                "Property.check"
            )
        if classify is not None:
            self.classify = classify
        if trivial is not None:
            self.trivial = trivial
        if name is not None:
            self.name = name
        if expect is not None:
            self.expect = bool(expect)
        self.arguments = tuple(arbitrary(g) for g in self.generators)
        self.input_generator = TupleGenerator(self.arguments)

    def check(self, *args):
        raise NotImplementedError("%s.check" % (type(self).__name__,))

    def classify(self, *args):
        return ""

    def trivial(self, *args):
        return False

    def generate_input(self, random, size):
        return self.input_generator.generate(random, size)

    def shrink_input(self, shrinkable):
        """The simpler candidates of a generated input, lazily."""
        return shrinkable.shrinks()

    def check_input(self, args):
        result = self.check(*args)
        return result is None or bool(result)

    def classify_input(self, args):
        return self.classify(*args) or ""

    def trivial_input(self, args):
        return bool(self.trivial(*args))

    def __call__(self, *args):
        return self.check(*args)

    def __repr__(self):
        return "Property(%s, name=%r)" % (
            ", ".join(map(repr, self.arguments)),
            self.name,
        )


def for_all(*generators, name=None, expect=True, classify=None, trivial=None):
    """Decorator turning a check function into a :class:`Property` over
    generators, named after the function unless a name is given."""

    def accept(check):
        return Property(
            *generators,
            check=check,
            classify=classify,
            trivial=trivial,
            name=name or check.__name__,
            expect=expect,
        )

    return accept
