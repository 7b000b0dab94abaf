# This file is part of qcheck.
#
# Copyright the qcheck Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""A fluent way of writing a property in a single expression::

    gen([int]).property(
        "sorting is idempotent", lambda xs: sorted(sorted(xs)) == sorted(xs)
    ).classify(lambda xs: str(len(xs))).test_with_output()

Each step returns a new builder, so a partially built check can be reused.
"""

import attr

from qcheck.core import quick_check, quick_check_output
from qcheck.errors import InvalidArgument
from qcheck.property import DEFAULT_NAME, Property
from qcheck.utils.conventions import not_set


def always_passes(*args):
    return True


@attr.s(frozen=True)
class CompactCheck:
    generators = attr.ib(converter=tuple)
    name = attr.ib(default="")
    check = attr.ib(default=None)
    trivial_function = attr.ib(default=None)
    classify_function = attr.ib(default=None)

    def property(self, name, check):
        if self.check is not None:
            raise InvalidArgument("The check function of %r is already set" % (self,))
        return attr.evolve(self, name=name, check=check)

    def trivial(self, trivial):
        if self.trivial_function is not None:
            raise InvalidArgument(
                "The trivial function of %r is already set" % (self,)
            )
        return attr.evolve(self, trivial_function=trivial)

    def classify(self, classify):
        if self.classify_function is not None:
            raise InvalidArgument(
                "The classify function of %r is already set" % (self,)
            )
        return attr.evolve(self, classify_function=classify)

    def as_property(self):
        return Property(
            *self.generators,
            check=self.check or always_passes,
            trivial=self.trivial_function,
            classify=self.classify_function,
            name=self.name or DEFAULT_NAME,
        )

    def test(self, max_success=None, max_discarded=0, max_size=0, **kwargs):
        return quick_check(
            self.as_property(), max_success, max_discarded, max_size, **kwargs
        )

    def test_with_output(
        self,
        out=None,
        max_success=None,
        max_discarded=0,
        max_size=0,
        shrink_timeout=not_set,
        seed=None,
        **kwargs,
    ):
        return quick_check_output(
            self.as_property(),
            out,
            max_success,
            max_discarded,
            max_size,
            shrink_timeout,
            seed,
            **kwargs,
        )


def gen(*generators):
    """Starts a compact check over generators (or descriptors)."""
    if not generators:
        raise InvalidArgument("gen() needs at least one generator")
    return CompactCheck(generators)
