# This file is part of qcheck.
#
# Copyright the qcheck Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Renders generated values for failure reports.

Values are shown the way they would be written as Python literals where
that is possible, so a reported input can be pasted straight back into a
test.
"""

import math
from functools import singledispatch

from qcheck.internal.reflection import get_pretty_function_description


class Show:
    def __init__(self):
        self.__dispatch = singledispatch(generic_string)

    def extend(self, typ):
        return self.__dispatch.register(typ)

    def __call__(self, value, seen=None):
        if seen is None:
            seen = set()
        if id(value) in seen:
            return "(...)"
        seen.add(id(value))
        try:
            return self.__dispatch(value, seen)
        finally:
            seen.discard(id(value))


def generic_string(value, seen):
    if callable(value) and hasattr(value, "__name__"):
        return get_pretty_function_description(value)
    if type(value) is object:
        return "object()"
    return repr(value)


show = Show()


@show.extend(bool)
def repr_string(value, seen):
    return repr(value)


@show.extend(int)
def int_string(value, seen):
    return repr(value)


@show.extend(str)
def text_string(value, seen):
    return repr(value)


@show.extend(bytes)
def binary_string(value, seen):
    return repr(value)


@show.extend(type)
def type_string(value, seen):
    return value.__name__


def is_nasty_float(x):
    return math.isnan(x) or math.isinf(x)


@show.extend(float)
def float_string(value, seen):
    if is_nasty_float(value):
        return "float(%r)" % (str(value),)
    else:
        return repr(value)


@show.extend(list)
def list_string(value, seen):
    return "[%s]" % (", ".join(show(c, seen) for c in value))


@show.extend(set)
def set_string(value, seen):
    if value:
        return "{%s}" % (", ".join(sorted(show(c, seen) for c in value)))
    else:
        return repr(value)


@show.extend(frozenset)
def frozenset_string(value, seen):
    if value:
        return "frozenset({%s})" % (", ".join(sorted(show(c, seen) for c in value)))
    else:
        return repr(value)


@show.extend(tuple)
def tuple_string(value, seen):
    if hasattr(value, "_fields"):
        return "%s(%s)" % (
            value.__class__.__name__,
            ", ".join(
                "%s=%s" % (f, show(getattr(value, f), seen)) for f in value._fields
            ),
        )
    else:
        core = ", ".join(show(c, seen) for c in value)
        if len(value) == 1:
            core += ","
        return "(%s)" % (core,)


@show.extend(dict)
def dict_string(value, seen):
    return (
        "{"
        + ", ".join(
            show(k1, seen) + ": " + show(v1, seen) for k1, v1 in value.items()
        )
        + "}"
    )
