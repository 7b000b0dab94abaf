# This file is part of qcheck.
#
# Copyright the qcheck Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.


class QCheckException(Exception):
    """Generic parent class for exceptions thrown by qcheck."""


class InvalidArgument(QCheckException, TypeError):
    """Used to indicate that the arguments to a qcheck function were in some
    manner incorrect."""


class MissingArbitrary(InvalidArgument):
    """No default generator is registered for the requested descriptor.

    This is raised when a property or generator is constructed, never
    while a check is running.
    """

    def __init__(self, descriptor):
        super().__init__(
            f"No arbitrary generator is registered for descriptor {descriptor!r}. "
            "Pass an explicit generator or register one with register_arbitrary."
        )
        self.descriptor = descriptor


class InvalidSeed(InvalidArgument):
    """A seed was given that is not an unsigned 32-bit integer."""


class InvalidState(QCheckException):
    """The system is not in a state where you were allowed to do that."""


class UnsatisfiedAssumption(QCheckException):
    """An internal error raised by assume.

    If you're seeing this error something has gone wrong.
    """
