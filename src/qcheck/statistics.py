# This file is part of qcheck.
#
# Copyright the qcheck Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from sortedcontainers import SortedList

MAX_LABELS_SHOWN = 20


def collect_labels(counts):
    """Turns a mapping of label to count into the (count, label) pairs kept
    on a Result, ordered by count and then label."""
    return SortedList((count, label) for label, count in counts.items() if label)


def describe_labels(labels, num_tests):
    """Lines describing how often each label was seen, most frequent first,
    as a whole percentage of num_tests."""
    lines = []
    if not num_tests:
        return lines
    for i, (count, label) in enumerate(reversed(labels)):
        if i == MAX_LABELS_SHOWN:
            lines.append("  ...")
            break
        lines.append("%3d%% %s" % (100 * count // num_tests, label))
    return lines
