# This file is part of qcheck.
#
# Copyright the qcheck Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Descriptors for the value types that have no Python builtin of their own.

Python's ``int`` is unbounded, so fixed-width integers are described by an
:class:`IntegralType` carrying its bounds. Each descriptor can be passed
anywhere a generator is expected and is resolved to its default generator.
"""

import attr


@attr.s(frozen=True, repr=False)
class IntegralType:
    name = attr.ib()
    min_value = attr.ib()
    max_value = attr.ib()

    @property
    def signed(self):
        return self.min_value < 0

    def __contains__(self, value):
        return self.min_value <= value <= self.max_value

    def __repr__(self):
        return self.name


def signed_type(name, bits):
    return IntegralType(name, -(2 ** (bits - 1)), 2 ** (bits - 1) - 1)


def unsigned_type(name, bits):
    return IntegralType(name, 0, 2**bits - 1)


int8 = signed_type("int8", 8)
uint8 = unsigned_type("uint8", 8)
int16 = signed_type("int16", 16)
uint16 = unsigned_type("uint16", 16)
int32 = signed_type("int32", 32)
uint32 = unsigned_type("uint32", 32)
int64 = signed_type("int64", 64)
uint64 = unsigned_type("uint64", 64)

integral_types = (int8, uint8, int16, uint16, int32, uint32, int64, uint64)


@attr.s(frozen=True, repr=False)
class CharacterType:
    """A single printable character, generated as a one-character str."""

    def __repr__(self):
        return "char"


char = CharacterType()


@attr.s(frozen=True)
class Array:
    """A list of exactly ``length`` values described by ``element``."""

    element = attr.ib()
    length = attr.ib()
