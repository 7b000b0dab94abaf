# This file is part of qcheck.
#
# Copyright the qcheck Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from qcheck.generator.core import StatelessGenerator, is_rejection

MIN_PRINTABLE = 0x20
MAX_PRINTABLE = 0x7F

SIMPLE_CHARACTERS = "abcABC123 \n\0"


def character_rank(c):
    """Orders characters from simplest to most complex: lowercase letters,
    uppercase letters, digits, space, other whitespace and then everything
    else, each group in code point order."""
    return (
        not c.islower(),
        not c.isupper(),
        not c.isdigit(),
        c != " ",
        not c.isspace(),
        c,
    )


def shrink_character(c):
    candidates = list(SIMPLE_CHARACTERS)
    if c.isupper():
        candidates.append(c.lower())
    rank = character_rank(c)
    result = []
    for candidate in candidates:
        if character_rank(candidate) < rank and candidate not in result:
            result.append(candidate)
    return result


class CharacterGenerator(StatelessGenerator):
    """Single characters drawn uniformly from the printable ASCII range."""

    def do_generate(self, random, size):
        return chr(random.randint(MIN_PRINTABLE, MAX_PRINTABLE))

    def shrink(self, value):
        return shrink_character(value)

    def __repr__(self):
        return "arbitrary(char)"


class StringGenerator(StatelessGenerator):
    """Strings of up to size characters. Shrinking removes one character at
    a time."""

    def __init__(self, characters=None):
        self.characters = characters or CharacterGenerator()

    def do_generate(self, random, size):
        length = random.randint(0, size)
        result = []
        for _ in range(length):
            c = self.characters.generate(random, size)
            if is_rejection(c):
                return c
            result.append(c.value)
        return "".join(result)

    def shrink(self, value):
        for i in range(len(value)):
            yield value[:i] + value[i + 1 :]

    def __repr__(self):
        if isinstance(self.characters, CharacterGenerator):
            return "strings()"
        return "strings(%r)" % (self.characters,)
