# This file is part of qcheck.
#
# Copyright the qcheck Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from qcheck import Property, quick_check, quick_check_output, reporting
from qcheck._settings import Verbosity, local_settings, settings
from qcheck.reporting import debug_report, report, verbose_report

from tests.common.utils import capture_out


def always_fails():
    return Property(int, check=lambda x: False)


def test_quick_check_prints_nothing():
    with capture_out() as o:
        quick_check(always_fails(), seed=0)
    assert o.getvalue() == ""


def test_quick_check_output_prints_to_stdout_by_default():
    with capture_out() as o:
        quick_check_output(always_fails(), seed=0)
    assert "*** Failed!" in o.getvalue()


def test_quiet_verbosity_suppresses_output():
    with capture_out() as o:
        quick_check_output(always_fails(), seed=0, settings=settings(verbosity=0))
    assert o.getvalue() == ""


def test_verbose_output_describes_every_trial():
    with capture_out() as o:
        quick_check_output(
            Property(int, check=lambda x: True),
            max_success=5,
            seed=0,
            settings=settings(verbosity=Verbosity.verbose),
        )
    assert o.getvalue().count("passed: (") == 5


def test_can_print_bytes():
    with capture_out() as o:
        report(b"hi")
    assert o.getvalue() == "hi\n"


def test_reports_are_computed_lazily():
    calls = []

    def message():
        calls.append(1)
        return "hi"

    with capture_out() as o:
        verbose_report(message)
    assert not calls
    assert o.getvalue() == ""


def test_does_not_print_debug_in_verbose():
    with local_settings(settings(verbosity=Verbosity.verbose)):
        with capture_out() as o:
            debug_report("Hi")
    assert not o.getvalue()


def test_does_print_debug_in_debug():
    with local_settings(settings(verbosity=Verbosity.debug)):
        with capture_out() as o:
            debug_report("Hi")
    assert "Hi" in o.getvalue()


def test_does_print_verbose_in_debug():
    with local_settings(settings(verbosity=Verbosity.debug)):
        with capture_out() as o:
            verbose_report("Hi")
    assert "Hi" in o.getvalue()


def test_silent_reporter_swallows_everything():
    with capture_out() as o:
        with reporting.with_reporter(reporting.silent):
            report("Hi")
    assert o.getvalue() == ""

