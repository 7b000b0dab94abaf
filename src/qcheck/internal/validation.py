# This file is part of qcheck.
#
# Copyright the qcheck Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import math
from numbers import Integral

from qcheck.errors import InvalidArgument


def check_type(typ, arg, name=""):
    if name:
        name += "="
    if not isinstance(arg, typ) or (isinstance(arg, bool) and typ is int):
        if isinstance(typ, type):
            typ_string = typ.__name__
        else:
            typ_string = "one of %s" % (", ".join(t.__name__ for t in typ))
        raise InvalidArgument(
            "Expected %s but got %s%r (type=%s)"
            % (typ_string, name, arg, type(arg).__name__)
        )


def check_valid_integer(value, name):
    """Checks that value is either unspecified, or a valid integer.

    Otherwise raises InvalidArgument.
    """
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidArgument(
            "Expected an integer but got %s=%r (type=%s)"
            % (name, value, type(value).__name__)
        )


def check_valid_size(value, name):
    """Checks that value is either unspecified, or a valid non-negative size
    expressed as an integer.

    Otherwise raises InvalidArgument.
    """
    if value is None:
        return
    check_valid_integer(value, name)
    if value < 0:
        raise InvalidArgument("Invalid size %s=%r < 0" % (name, value))


def check_valid_interval(lower_bound, upper_bound, lower_name, upper_name):
    """Checks that lower_bound and upper_bound are either unspecified, or they
    define a valid interval on the number line.

    Otherwise raises InvalidArgument.
    """
    if lower_bound is None or upper_bound is None:
        return
    if isinstance(lower_bound, float) and math.isnan(lower_bound):
        raise InvalidArgument("Invalid end point %s=%r" % (lower_name, lower_bound))
    if isinstance(upper_bound, float) and math.isnan(upper_bound):
        raise InvalidArgument("Invalid end point %s=%r" % (upper_name, upper_bound))
    if upper_bound < lower_bound:
        raise InvalidArgument(
            "Cannot have %s=%r < %s=%r"
            % (upper_name, upper_bound, lower_name, lower_bound)
        )
