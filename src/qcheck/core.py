# This file is part of qcheck.
#
# Copyright the qcheck Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Running properties: generating trials, shrinking failures and reporting
the outcome."""

import sys
import traceback
from enum import Enum

import attr
from sortedcontainers import SortedList

from qcheck._settings import Verbosity, local_settings, settings as Settings
from qcheck.errors import InvalidArgument, UnsatisfiedAssumption
from qcheck.generator.core import is_rejection
from qcheck.internal.entropy import (
    SEED_ENVIRONMENT_VARIABLE,
    RandomSource,
    resolve_seed,
)
from qcheck.internal.shrinker import Shrinker
from qcheck.property import Property
from qcheck.reporting import (
    debug_report,
    report,
    silent,
    stream_reporter,
    verbose_report,
    with_reporter,
)
from qcheck.statistics import collect_labels, describe_labels
from qcheck.utils.conventions import not_set
from qcheck.utils.show import show

DISABLE_SHRINK_TIMEOUT = None


class ResultType(Enum):
    success = "QC_SUCCESS"
    gave_up = "QC_GAVE_UP"
    failure = "QC_FAILURE"
    no_expected_failure = "QC_NO_EXPECTED_FAILURE"

    def __repr__(self):
        return "ResultType.%s" % (self.name,)


QC_SUCCESS = ResultType.success
QC_GAVE_UP = ResultType.gave_up
QC_FAILURE = ResultType.failure
QC_NO_EXPECTED_FAILURE = ResultType.no_expected_failure


@attr.s(frozen=True)
class Result:
    """The outcome of checking a property.

    ``num_tests`` counts the trials that ran to completion, including the
    failing one. ``labels`` holds a (count, label) pair per classification
    label seen. ``num_shrinks``, ``used_size`` and ``failing_input`` are
    only meaningful when the property failed.
    """

    result = attr.ib()
    num_tests = attr.ib()
    labels = attr.ib(factory=SortedList)
    seed = attr.ib(default=None)
    num_shrinks = attr.ib(default=0)
    used_size = attr.ib(default=0)
    failing_input = attr.ib(default=None)

    @property
    def succeeded(self):
        return self.result is ResultType.success


def plural(n, word):
    return "%d %s%s" % (n, word, "" if n == 1 else "s")


class QuickCheck:
    """A single run of a property under some settings and a seed."""

    def __init__(self, prop, settings, seed):
        if not isinstance(prop, Property):
            raise InvalidArgument("Expected a Property but got prop=%r" % (prop,))
        self.prop = prop
        self.settings = settings
        self.seed = seed
        self.random = RandomSource(seed)
        self.max_success = settings.max_success
        self.max_discarded = settings.effective_max_discarded
        self.max_size = settings.max_size
        self.num_success = 0
        self.num_discarded = 0
        self.num_trivial = 0
        self.label_counts = {}
        self.progress = []

    def run(self):
        report('* Checking property "%s" ...' % (self.prop.name,))
        while self.num_success < self.max_success:
            if self.num_discarded >= self.max_discarded:
                return self.gave_up()
            size = (
                self.num_success * self.max_size + self.num_discarded
            ) // self.max_success
            try:
                generated = self.prop.generate_input(self.random, size)
            except Exception:
                self.discard_after_exception("generating an input")
                continue
            if is_rejection(generated):
                verbose_report("Discarded an input: %s" % (generated.reason,))
                self.discard()
                continue
            args = generated.value
            try:
                success = self.prop.check_input(args)
            except UnsatisfiedAssumption:
                verbose_report(
                    lambda: "Unsatisfied assumption for %s" % (show(args),)
                )
                self.discard()
                continue
            except Exception:
                report("Caught exception checking property...")
                debug_report(traceback.format_exc())
                success = False
            try:
                trivial = self.prop.trivial_input(args)
                label = self.prop.classify_input(args)
            except Exception:
                self.discard_after_exception("classifying an input")
                continue
            if trivial:
                self.num_trivial += 1
            if label:
                self.label_counts[label] = self.label_counts.get(label, 0) + 1
            verbose_report(
                lambda: "Trial %d (size %d) %s: %s"
                % (
                    self.num_success + 1,
                    size,
                    "passed" if success else "failed",
                    show(args),
                )
            )
            if not success:
                return self.failed(generated, size)
            self.num_success += 1
            self.progress.append(".")
        return self.passed()

    def discard(self):
        self.num_discarded += 1
        self.progress.append("x")

    def discard_after_exception(self, activity):
        report("Caught exception %s, discarding the trial..." % (activity,))
        debug_report(traceback.format_exc())
        self.discard()

    def report_progress(self):
        if self.progress:
            report("".join(self.progress))

    def trivial_summary(self):
        if self.num_trivial == 0:
            return ""
        return " (%d%% trivial)" % (100 * self.num_trivial // self.num_success,)

    def report_seed(self):
        report(
            "Reproduce with seed=%d (or %s=%d)"
            % (self.seed, SEED_ENVIRONMENT_VARIABLE, self.seed)
        )

    def result(self, result_type, **kwargs):
        return Result(
            result=result_type,
            labels=collect_labels(self.label_counts),
            seed=self.seed,
            **kwargs,
        )

    def gave_up(self):
        self.report_progress()
        report("*** Gave up! Passed only %s." % (plural(self.num_success, "test"),))
        self.report_seed()
        return self.result(ResultType.gave_up, num_tests=self.num_success)

    def failed(self, generated, size):
        self.report_progress()
        num_tests = self.num_success + 1
        shrunk = Shrinker(self.prop, self.shrink_timeout()).shrink(generated)
        if self.prop.expect:
            text = "*** Failed! "
        else:
            text = "+++ OK, failed as expected. "
        text += "Falsifiable after %s" % (plural(num_tests, "test"),)
        if shrunk.num_shrinks > 0:
            text += " and %s" % (plural(shrunk.num_shrinks, "shrink"),)
        report(text + " for input:")
        failing_input = shrunk.shrinkable.value
        for i, value in enumerate(failing_input):
            report("  %d: %s" % (i, show(value)))
        if self.prop.expect:
            self.report_seed()
            result_type = ResultType.failure
        else:
            result_type = ResultType.success
        return self.result(
            result_type,
            num_tests=num_tests,
            num_shrinks=shrunk.num_shrinks,
            used_size=size,
            failing_input=failing_input,
        )

    def passed(self):
        self.report_progress()
        if self.prop.expect:
            report(
                "+++ OK, passed %s%s."
                % (plural(self.num_success, "test"), self.trivial_summary())
            )
            result_type = ResultType.success
        else:
            report(
                "*** Failed! Expected failure but passed %s%s."
                % (plural(self.num_success, "test"), self.trivial_summary())
            )
            result_type = ResultType.no_expected_failure
        labels = collect_labels(self.label_counts)
        for line in describe_labels(labels, self.num_success):
            report(line)
        if result_type is ResultType.no_expected_failure:
            self.report_seed()
        return self.result(result_type, num_tests=self.num_success)

    def shrink_timeout(self):
        timeout = self.settings.shrink_timeout
        if timeout is None:
            return None
        return timeout.total_seconds()


def run_settings(settings, max_success, max_discarded, max_size, shrink_timeout):
    """The settings for a run: those given (or the current default), with
    any explicitly passed limits taking precedence. A max_discarded or
    max_size of 0 or None means the default."""
    overrides = {}
    if max_success is not None:
        overrides["max_success"] = max_success
    if max_discarded:
        overrides["max_discarded"] = max_discarded
    if max_size:
        overrides["max_size"] = max_size
    if shrink_timeout is not not_set:
        overrides["shrink_timeout"] = shrink_timeout
    if settings is not None and not isinstance(settings, Settings):
        raise InvalidArgument("settings=%r is not a settings instance" % (settings,))
    return Settings(settings, **overrides)


def quick_check(
    prop,
    max_success=None,
    max_discarded=0,
    max_size=0,
    *,
    shrink_timeout=not_set,
    seed=None,
    settings=None,
):
    """Checks prop without printing anything and returns a :class:`Result`.

    max_success defaults to 100 trials, max_discarded to five times
    max_success and max_size to 100 (0 or None select the default).
    shrink_timeout is a number of seconds or a timedelta, or None for no
    limit, and defaults to 30 seconds. seed defaults to the value of
    QCHECK_SEED, or failing that to one derived from the clock.
    """
    s = run_settings(settings, max_success, max_discarded, max_size, shrink_timeout)
    s = Settings(s, verbosity=Verbosity.quiet)
    seed = resolve_seed(seed)
    with local_settings(s), with_reporter(silent):
        return QuickCheck(prop, s, seed).run()


def quick_check_output(
    prop,
    out=None,
    max_success=None,
    max_discarded=0,
    max_size=0,
    shrink_timeout=not_set,
    seed=None,
    *,
    settings=None,
):
    """Like :func:`quick_check`, but also writes a human readable account of
    the run to out, which defaults to standard output."""
    if out is None:
        out = sys.stdout
    s = run_settings(settings, max_success, max_discarded, max_size, shrink_timeout)
    seed = resolve_seed(seed)
    with local_settings(s), with_reporter(stream_reporter(out)):
        return QuickCheck(prop, s, seed).run()
