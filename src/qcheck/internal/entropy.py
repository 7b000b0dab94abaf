# This file is part of qcheck.
#
# Copyright the qcheck Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Seed handling and the random source every generator draws from."""

import os
import random
import time

from qcheck.errors import InvalidSeed

SEED_ENVIRONMENT_VARIABLE = "QCHECK_SEED"
MAX_SEED = 2**32 - 1


class RandomSource(random.Random):
    """A Mersenne Twister which remembers the seed it was created with.

    Besides the random stream it carries the per-run state of the generators
    that need any, so that generators themselves stay immutable and a fresh
    source always replays a run exactly.
    """

    def __init__(self, seed):
        super().__init__(seed)
        self.seed_value = seed
        self.__run_state = {}

    def run_state(self, key, factory):
        """Returns the state registered for key in this run, creating it
        with factory() the first time it is asked for."""
        try:
            return self.__run_state[key]
        except KeyError:
            result = factory()
            self.__run_state[key] = result
            return result

    def __repr__(self):
        return "RandomSource(%s)" % (self.seed_value,)


def check_seed(seed, name="seed"):
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise InvalidSeed(
            "%s=%r (type %s) must be an integer in the range [0, %d]"
            % (name, seed, type(seed).__name__, MAX_SEED)
        )
    if not 0 <= seed <= MAX_SEED:
        raise InvalidSeed(
            "%s=%r is out of range: seeds are unsigned 32-bit integers in "
            "[0, %d]" % (name, seed, MAX_SEED)
        )
    return seed


def seed_from_environment(environ=None):
    """Returns the seed named by QCHECK_SEED, or None if it is not set.

    A variable which is set but does not hold a valid seed is an error rather
    than being silently replaced by a fresh seed, as the user asked for a
    reproduction that we cannot give them.
    """
    if environ is None:
        environ = os.environ
    raw = environ.get(SEED_ENVIRONMENT_VARIABLE)
    if raw is None:
        return None
    try:
        seed = int(raw.strip())
    except ValueError:
        raise InvalidSeed(
            "%s=%r is not an integer" % (SEED_ENVIRONMENT_VARIABLE, raw)
        ) from None
    return check_seed(seed, SEED_ENVIRONMENT_VARIABLE)


def seed_from_time():
    return int(time.time() * 1000000) & MAX_SEED


def resolve_seed(seed=None, environ=None):
    """An explicit seed wins over the environment, which wins over the
    clock."""
    if seed is not None:
        return check_seed(seed)
    from_environment = seed_from_environment(environ)
    if from_environment is not None:
        return from_environment
    return seed_from_time()


def new_random(seed=None):
    return RandomSource(resolve_seed(seed))
