# This file is part of qcheck.
#
# Copyright the qcheck Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from qcheck.errors import UnsatisfiedAssumption


def reject():
    raise UnsatisfiedAssumption()


def assume(condition):
    """Calling ``assume`` is like an :ref:`assert <python:assert>` that marks
    the trial as discarded, rather than failing the property.

    Discarded trials count against the discard budget, so an assumption
    which rarely holds will make the check give up.
    """
    if not condition:
        raise UnsatisfiedAssumption()
    return True
