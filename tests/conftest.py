# This file is part of qcheck.
#
# Copyright the qcheck Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import time as time_module

import pytest

from qcheck import settings
from qcheck.internal.entropy import SEED_ENVIRONMENT_VARIABLE

from tests.common import TIME_INCREMENT


@pytest.fixture(scope="function", autouse=True)
def consistently_increment_time(monkeypatch):
    """Rather than rely on real system time we monkey patch time.time so that
    it passes at a consistent rate between calls.

    The reason for this is that when these tests run in CI, performance is
    extremely variable and the VM the tests are on might go to sleep for a
    bit, introducing arbitrary delays. This can cause a number of tests to
    fail flakily.

    Replacing time with a fake version under our control avoids this problem.
    """
    current_time = [time_module.time()]

    def time():
        current_time[0] += TIME_INCREMENT
        return current_time[0]

    def sleep(naptime):
        current_time[0] += naptime

    monkeypatch.setattr(time_module, "time", time)
    monkeypatch.setattr(time_module, "monotonic", time)
    monkeypatch.setattr(time_module, "perf_counter", time)
    monkeypatch.setattr(time_module, "sleep", sleep)


@pytest.fixture(scope="function", autouse=True)
def no_seed_from_environment(monkeypatch):
    monkeypatch.delenv(SEED_ENVIRONMENT_VARIABLE, raising=False)


@pytest.fixture(scope="function", autouse=True)
def restore_default_profile():
    yield
    settings.load_profile("default")
