# This file is part of qcheck.
#
# Copyright the qcheck Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""
-------------
qcheck[cli]
-------------

This module provides qcheck's command-line interface, for looking at what
the default generators produce and how their values shrink. It requires the
:pypi:`click` package.

Run :command:`qcheck --help` in your terminal for details.
"""

import click

from qcheck import types
from qcheck.generators import tuples
from qcheck.sampling import sample_output, sample_shrink_output
from qcheck.version import __version__

TYPE_NAMES = {
    "bool": bool,
    "char": types.char,
    "wchar_t": types.char,
    "signed char": types.int8,
    "unsigned char": types.uint8,
    "short": types.int16,
    "signed short": types.int16,
    "unsigned short": types.uint16,
    "int": types.int32,
    "signed": types.int32,
    "unsigned": types.uint32,
    "signed int": types.int32,
    "unsigned int": types.uint32,
    "long": types.int64,
    "signed long": types.int64,
    "unsigned long": types.uint64,
    "float": float,
    "double": float,
    "long double": float,
    "pair": (types.int32, types.int32),
    "tuple": tuples(types.int32, types.int32, types.int32),
    "string": str,
}

USAGE = "Usage: TYPES... (e.g., int, double, string)"


def for_each_type(names, action):
    if not names:
        click.echo(USAGE)
        return
    for name in names:
        try:
            descriptor = TYPE_NAMES[name]
        except KeyError:
            click.echo('unrecognized type "%s"' % (name,))
            continue
        action(descriptor)


class ClickOutput:
    def write(self, text):
        click.echo(text, nl=False)


@click.group(context_settings={"help_option_names": ("-h", "--help")})
@click.version_option(version=__version__)
def main():
    pass


@main.command()
@click.argument("type_names", metavar="TYPES", nargs=-1)
@click.option("-n", "--count", default=20, show_default=True, help="values per type")
@click.option("--seed", type=int, default=None, help="seed for the random source")
def sample(type_names, count, seed):
    """Print sampled values of each of TYPES.

    Type names with spaces in them, such as "unsigned int", need quoting.
    """
    for_each_type(
        type_names,
        lambda descriptor: sample_output(descriptor, ClickOutput(), count, seed),
    )


@main.command()
@click.argument("type_names", metavar="TYPES", nargs=-1)
@click.option("-n", "--count", default=20, show_default=True, help="values per type")
@click.option("--seed", type=int, default=None, help="seed for the random source")
@click.option(
    "--randomized/--in-order",
    default=False,
    help="show a random selection of each value's shrink candidates",
)
def shrink(type_names, count, seed, randomized):
    """Print sampled values of each of TYPES with their shrink candidates."""
    for_each_type(
        type_names,
        lambda descriptor: sample_shrink_output(
            descriptor, ClickOutput(), count, randomized, seed
        ),
    )
