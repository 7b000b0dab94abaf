# This file is part of qcheck.
#
# Copyright the qcheck Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""This file can approximately be considered the collection of qcheck going
to really unreasonable lengths to produce pretty output."""

import inspect
import re
import types

LAMBDA_RE = re.compile(r"\blambda\b")
lambda_source_cache = {}


def extract_lambda_source(f):
    try:
        return lambda_source_cache[f.__code__]
    except KeyError:
        pass
    result = _extract_lambda_source(f)
    lambda_source_cache[f.__code__] = result
    return result


def _extract_lambda_source(f):
    """Extracts a single lambda expression from the source of the line that
    defines it. Returns a string indicating an unknown body if the line holds
    anything other than exactly one lambda."""
    signature = str(inspect.signature(f))[1:-1]
    if signature:
        prefix = "lambda %s: " % (signature,)
    else:
        prefix = "lambda: "
    try:
        source = inspect.getsource(f)
    except (OSError, TypeError):
        return prefix + "<unknown>"
    source = " ".join(source.split())
    matches = list(LAMBDA_RE.finditer(source))
    if len(matches) != 1:
        return prefix + "<unknown>"
    body = source[matches[0].end() :]
    colon = body.find(":")
    body = body[colon + 1 :].strip()
    # Trim trailing syntax belonging to the enclosing expression.
    depth = 0
    for i, c in enumerate(body):
        if c in "([{":
            depth += 1
        elif c in ")]}":
            if depth == 0:
                body = body[:i]
                break
            depth -= 1
        elif c == "," and depth == 0:
            body = body[:i]
            break
    return prefix + body.strip()


def get_pretty_function_description(f):
    if not hasattr(f, "__name__"):
        return repr(f)
    name = f.__name__
    if name == "<lambda>":
        return extract_lambda_source(f)
    elif isinstance(f, types.MethodType):
        self = f.__self__
        if not (self is None or inspect.isclass(self)):
            return "%r.%s" % (self, name)
    return name
