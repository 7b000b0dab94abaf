# This file is part of qcheck.
#
# Copyright the qcheck Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import re
import time

import pytest

from qcheck import (
    QC_FAILURE,
    QC_GAVE_UP,
    QC_NO_EXPECTED_FAILURE,
    QC_SUCCESS,
    Property,
    assume,
    quick_check,
    settings,
)
from qcheck.core import plural
from qcheck.errors import InvalidArgument
from qcheck.generator.core import Shrinkable
from qcheck.generators import choose, convert, just, stateless
from qcheck.internal.entropy import RandomSource
from qcheck.internal.shrinker import Shrinker

from tests.common.utils import run_with_output


def reverse_twice(xs):
    return list(reversed(list(reversed(xs)))) == xs


def buggy_selection_sort(xs):
    xs = list(xs)
    for i in range(len(xs) - 2):
        j = min(range(i, len(xs)), key=xs.__getitem__)
        xs[i], xs[j] = xs[j], xs[i]
    return xs


def test_a_true_property_passes_every_trial():
    result = quick_check(Property([int], check=reverse_twice), seed=1)
    assert result.result is QC_SUCCESS
    assert result.succeeded
    assert result.num_tests == 100
    assert result.failing_input is None


def test_a_false_property_is_shrunk_to_a_minimal_counterexample():
    prop = Property([int], check=lambda xs: buggy_selection_sort(xs) == sorted(xs))
    result = quick_check(prop, seed=2)
    assert result.result is QC_FAILURE
    (xs,) = result.failing_input
    assert len(xs) == 2
    assert xs[0] > xs[1]


def test_a_bounded_property_holds():
    prop = Property(choose(2, 1000), check=lambda a: a * a > a)
    assert quick_check(prop, seed=3).result is QC_SUCCESS


def test_always_false_fails_on_the_first_trial():
    prop = Property(bool, check=lambda b: False)
    (first,) = prop.generate_input(RandomSource(4), 0).value
    result = quick_check(prop, seed=4)
    assert result.result is QC_FAILURE
    assert result.num_tests == 1
    assert result.failing_input == (False,)
    assert result.num_shrinks == (1 if first else 0)


def test_a_failure_reports_the_input_and_seed():
    prop = Property(bool, check=lambda b: False, name="never")
    result, out = run_with_output(prop, seed=17)
    lines = out.splitlines()
    assert lines[0] == '* Checking property "never" ...'
    assert re.match(
        r"\*\*\* Failed! Falsifiable after 1 test( and 1 shrink)? for", lines[1]
    )
    assert "  0: False" in lines
    assert lines[-1] == "Reproduce with seed=17 (or QCHECK_SEED=17)"


def test_reports_the_number_of_shrinks():
    prop = Property(choose(0, 1000), check=lambda x: x < 10)
    result, out = run_with_output(prop, seed=5)
    assert result.failing_input == (10,)
    if result.num_shrinks:
        assert "and %s for input:" % (plural(result.num_shrinks, "shrink"),) in out
    assert "  0: 10" in out


def test_passing_output():
    result, out = run_with_output(Property(int, check=lambda x: True), seed=6)
    lines = out.splitlines()
    assert lines[0] == '* Checking property "no-name" ...'
    assert lines[1] == "." * 100
    assert lines[2] == "+++ OK, passed 100 tests."
    assert "Reproduce" not in out


def test_same_seed_gives_the_same_run():
    prop = Property([int], check=lambda xs: sum(xs) < 50)
    first = run_with_output(prop, seed=7)
    second = run_with_output(prop, seed=7)
    assert first == second


def test_seed_is_taken_from_the_environment(monkeypatch):
    monkeypatch.setenv("QCHECK_SEED", "1234")
    result = quick_check(Property(int, check=lambda x: True))
    assert result.seed == 1234


def test_explicit_seed_wins_over_the_environment(monkeypatch):
    monkeypatch.setenv("QCHECK_SEED", "1234")
    assert quick_check(Property(int, check=lambda x: True), seed=5).seed == 5


def test_gives_up_when_every_trial_is_discarded():
    prop = Property(int, check=lambda x: assume(False))
    result, out = run_with_output(prop, seed=8, max_discarded=20)
    assert result.result is QC_GAVE_UP
    assert result.num_tests == 0
    assert "x" * 20 in out
    assert "*** Gave up! Passed only 0 tests." in out
    assert "Reproduce with seed=8" in out


def test_discard_budget_defaults_to_five_per_success():
    calls = []

    def check(x):
        calls.append(x)
        assume(False)

    quick_check(Property(int, check=check), max_success=7, seed=9)
    assert len(calls) == 35


def test_generator_rejections_are_discards():
    prop = Property(just(1).filter(lambda x: False), check=lambda x: True)
    assert quick_check(prop, seed=10, max_discarded=3).result is QC_GAVE_UP


def test_assumptions_discard_without_failing():
    prop = Property(choose(0, 10), check=lambda x: assume(x % 2 == 0) and x % 2 == 0)
    assert quick_check(prop, seed=11).result is QC_SUCCESS


def test_expected_failure_that_fails_is_success():
    prop = Property(choose(0, 100), check=lambda x: x < 5, expect=False)
    result, out = run_with_output(prop, seed=12)
    assert result.result is QC_SUCCESS
    assert result.failing_input == (5,)
    assert "+++ OK, failed as expected. Falsifiable after" in out
    assert "Reproduce" not in out


def test_expected_failure_that_passes():
    prop = Property(int, check=lambda x: True, expect=False)
    result, out = run_with_output(prop, seed=13, max_success=10)
    assert result.result is QC_NO_EXPECTED_FAILURE
    assert "*** Failed! Expected failure but passed 10 tests." in out
    assert "Reproduce with seed=13" in out


def test_exceptions_count_as_failures():
    def check(x):
        if x >= 3:
            raise ValueError(x)
        return True

    result, out = run_with_output(Property(choose(0, 100), check=check), seed=14)
    assert result.result is QC_FAILURE
    assert result.failing_input == (3,)
    assert "Caught exception checking property..." in out


def test_reports_trivial_percentage():
    prop = Property(choose(0, 1), check=lambda x: True, trivial=lambda x: x == 0)
    result, out = run_with_output(prop, seed=15)
    assert re.search(r"\+\+\+ OK, passed 100 tests \(\d+% trivial\)\.", out)


def test_reports_labels():
    prop = Property(
        choose(0, 10),
        check=lambda x: True,
        classify=lambda x: "even" if x % 2 == 0 else "odd",
    )
    result, out = run_with_output(prop, seed=16)
    assert {label for _, label in result.labels} == {"even", "odd"}
    assert sum(count for count, _ in result.labels) == 100
    assert re.search(r"^ *\d+% even$", out, re.MULTILINE)
    assert re.search(r"^ *\d+% odd$", out, re.MULTILINE)


def test_empty_labels_are_not_counted():
    prop = Property(int, check=lambda x: True, classify=lambda x: "")
    assert len(quick_check(prop, seed=17).labels) == 0


def test_size_grows_with_successes():
    sizes = []

    def produce(random, size):
        sizes.append(size)
        return 0

    prop = Property(stateless(produce), check=lambda x: True)
    quick_check(prop, seed=18, max_success=10, max_size=50)
    assert sizes == [i * 50 // 10 for i in range(10)]


def test_used_size_of_a_failure():
    prop = Property(stateless(lambda random, size: size), check=lambda s: s < 30)
    result = quick_check(prop, seed=19)
    assert result.result is QC_FAILURE
    assert result.used_size == 30


def test_uses_settings_from_the_profile():
    settings.register_profile("few", max_success=3)
    settings.load_profile("few")
    assert quick_check(Property(int, check=lambda x: True), seed=20).num_tests == 3


def test_explicit_arguments_override_settings():
    s = settings(max_success=3)
    result = quick_check(Property(int, check=lambda x: True), 5, seed=21, settings=s)
    assert result.num_tests == 5


def test_rejects_non_properties():
    with pytest.raises(InvalidArgument):
        quick_check(lambda x: True)


def test_rejects_bad_settings():
    with pytest.raises(InvalidArgument):
        quick_check(Property(int, check=lambda x: True), settings={"max_success": 1})


@pytest.mark.parametrize("kwargs", [{"max_success": 0}, {"max_discarded": -1}])
def test_validates_limits(kwargs):
    with pytest.raises(InvalidArgument):
        quick_check(Property(int, check=lambda x: True), **kwargs)


def counting_down(n):
    return Shrinkable((n,), lambda: iter([counting_down(n + 1)]))


def test_shrinking_stops_at_the_timeout():
    def check(n):
        time.sleep(10)
        return False

    prop = Property(int, check=check)
    shrunk = Shrinker(prop, timeout=25).shrink(counting_down(0))
    assert shrunk.timed_out
    assert shrunk.num_shrinks == 3
    assert shrunk.shrinkable.value == (3,)


def test_shrinking_without_a_timeout_runs_to_completion():
    prop = Property(int, check=lambda n: n > 1000)
    shrunk = Shrinker(prop, timeout=None).shrink(
        Shrinkable((5,), lambda: iter([Shrinkable((4,))]))
    )
    assert not shrunk.timed_out
    assert shrunk.shrinkable.value == (4,)
    assert shrunk.num_shrinks == 1


def test_shrinking_stops_when_listing_candidates_raises():
    def broken():
        raise ValueError()
        yield

    prop = Property(int, check=lambda n: False)
    shrunk = Shrinker(prop).shrink(
        Shrinkable((2,), lambda: iter([Shrinkable((1,), broken)]))
    )
    assert shrunk.interrupted
    assert shrunk.shrinkable.value == (1,)
    assert shrunk.num_shrinks == 1


def test_candidates_whose_assumptions_fail_are_not_taken():
    def check(n):
        assume(n != 1)
        return False

    shrunk = Shrinker(Property(int, check=check)).shrink(
        Shrinkable((2,), lambda: iter([Shrinkable((1,)), Shrinkable((0,))]))
    )
    assert shrunk.shrinkable.value == (0,)


def test_candidates_which_raise_are_taken():
    def check(n):
        if n == 1:
            raise ValueError()
        return n > 1

    shrunk = Shrinker(Property(int, check=check)).shrink(
        Shrinkable((0,), lambda: iter([Shrinkable((1,))]))
    )
    assert shrunk.shrinkable.value == (1,)


def raising_on(bad):
    def f(x):
        if x == bad:
            raise KeyError(x)
        return ""

    return f


def test_a_raising_trivial_discards_the_trial():
    prop = Property(choose(0, 5), check=lambda x: True, trivial=raising_on(1))
    result, out = run_with_output(prop, seed=1)
    assert result.result is QC_SUCCESS
    assert result.num_tests == 100
    assert "Caught exception classifying an input" in out
    assert "x" in out.splitlines()[-2]


def test_a_raising_classify_discards_the_trial():
    prop = Property(choose(0, 5), check=lambda x: True, classify=raising_on(3))
    result = quick_check(prop, seed=1)
    assert result.result is QC_SUCCESS
    assert result.num_tests == 100


def test_always_raising_classification_gives_up():
    def classify(x):
        raise KeyError(x)

    prop = Property(int, check=lambda x: False, classify=classify)
    result = quick_check(prop, seed=2, max_discarded=10)
    assert result.result is QC_GAVE_UP
    assert result.num_tests == 0


def test_a_raising_generator_function_discards_the_trial():
    def produce(random, size):
        if random.random() < 0.2:
            raise ValueError(size)
        return size

    prop = Property(stateless(produce), check=lambda x: True)
    result, out = run_with_output(prop, seed=3)
    assert result.result is QC_SUCCESS
    assert "Caught exception generating an input" in out


def test_a_raising_conversion_discards_the_trial():
    prop = Property(convert(lambda x: 1 // x, choose(0, 3)), check=lambda x: x <= 1)
    assert quick_check(prop, seed=4).result is QC_SUCCESS


def test_an_always_raising_generator_gives_up():
    def produce(random, size):
        raise ValueError(size)

    result, out = run_with_output(
        Property(stateless(produce), check=lambda x: True), seed=5, max_discarded=4
    )
    assert result.result is QC_GAVE_UP
    assert "xxxx" in out
