# This file is part of qcheck.
#
# Copyright the qcheck Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import time
import traceback

import attr

from qcheck.errors import UnsatisfiedAssumption
from qcheck.reporting import debug_report, verbose_report
from qcheck.utils.show import show


@attr.s(slots=True, frozen=True)
class ShrinkResult:
    shrinkable = attr.ib()
    num_shrinks = attr.ib()
    timed_out = attr.ib(default=False)
    interrupted = attr.ib(default=False)


class Shrinker:
    """Greedily minimizes a failing input.

    Starting from the failing input, the candidates of the current input are
    checked in order and the first one which still fails becomes the new
    current input. Shrinking stops when every candidate of the current input
    passes, when the timeout (in seconds, or None for no limit) runs out, or
    when listing the candidates raises.
    """

    def __init__(self, prop, timeout=None):
        self.prop = prop
        self.timeout = timeout

    def fails(self, args):
        try:
            return not self.prop.check_input(args)
        except UnsatisfiedAssumption:
            return False
        except Exception:
            debug_report(traceback.format_exc())
            return True

    def shrink(self, failing):
        start = time.monotonic()
        current = failing
        num_shrinks = 0

        def timed_out():
            return (
                self.timeout is not None
                and time.monotonic() - start >= self.timeout
            )

        while True:
            try:
                for candidate in self.prop.shrink_input(current):
                    if timed_out():
                        verbose_report(
                            "Shrinking timed out after %d shrinks" % (num_shrinks,)
                        )
                        return ShrinkResult(current, num_shrinks, timed_out=True)
                    if self.fails(candidate.value):
                        current = candidate
                        num_shrinks += 1
                        verbose_report(
                            lambda: "Shrunk input to %s" % (show(current.value),)
                        )
                        break
                else:
                    return ShrinkResult(current, num_shrinks)
            except Exception:
                debug_report(traceback.format_exc())
                verbose_report(
                    "Listing shrink candidates raised, stopping after %d shrinks"
                    % (num_shrinks,)
                )
                return ShrinkResult(current, num_shrinks, interrupted=True)
