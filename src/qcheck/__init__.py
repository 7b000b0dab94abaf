# This file is part of qcheck.
#
# Copyright the qcheck Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""qcheck is a library for property based testing.

A property is a check over values drawn from generators. qcheck runs the
check against many generated inputs of growing size, and when one fails
shrinks it to a simpler input that still fails before reporting it.
"""

from qcheck._settings import Verbosity, settings
from qcheck.arbitrary import arbitrary, arbitrary_for, register_arbitrary
from qcheck.compact import gen
from qcheck.control import assume, reject
from qcheck.core import (
    DISABLE_SHRINK_TIMEOUT,
    QC_FAILURE,
    QC_GAVE_UP,
    QC_NO_EXPECTED_FAILURE,
    QC_SUCCESS,
    Result,
    ResultType,
    quick_check,
    quick_check_output,
)
from qcheck.generator.core import Generator, Rejected, Shrinkable, StatelessGenerator
from qcheck.property import Property, for_all
from qcheck.sampling import sample, sample_output, sample_shrink, sample_shrink_output
from qcheck.version import __version__, __version_info__

__all__ = [
    "DISABLE_SHRINK_TIMEOUT",
    "Generator",
    "Property",
    "QC_FAILURE",
    "QC_GAVE_UP",
    "QC_NO_EXPECTED_FAILURE",
    "QC_SUCCESS",
    "Rejected",
    "Result",
    "ResultType",
    "Shrinkable",
    "StatelessGenerator",
    "Verbosity",
    "arbitrary",
    "arbitrary_for",
    "assume",
    "for_all",
    "gen",
    "quick_check",
    "quick_check_output",
    "register_arbitrary",
    "reject",
    "sample",
    "sample_output",
    "sample_shrink",
    "sample_shrink_output",
    "settings",
    "__version__",
    "__version_info__",
]
