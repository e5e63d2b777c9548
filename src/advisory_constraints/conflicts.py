# *******************************************************************************
# Copyright (c) 2025 Contributors to the Eclipse Foundation
#
# See the NOTICE file(s) distributed with this work for additional
# information regarding copyright ownership.
#
# This program and the accompanying materials are made available under the
# terms of the Apache License Version 2.0 which is available at
# https://www.apache.org/licenses/LICENSE-2.0
#
# SPDX-License-Identifier: Apache-2.0
# *******************************************************************************

from collections.abc import Iterable
from itertools import combinations

from .constraint import RangeConstraint, VersionConstraint
from .gh_logging import Logger

log = Logger(__name__)


def _range_sort_key(constraint: VersionConstraint) -> tuple[object, ...]:
    """Unbounded lower first, then by lower bound; unbounded upper last."""
    assert isinstance(constraint, RangeConstraint)

    lower = constraint.lower
    upper = constraint.upper
    lower_key = (0,) if lower is None else (1, lower.version, not lower.inclusive)
    upper_key = (1,) if upper is None else (0, upper.version, upper.inclusive)
    return (lower_key, upper_key)


def merge_constraints(
    constraints: Iterable[VersionConstraint],
) -> list[VersionConstraint]:
    """Merge constraints until no two of them can be merged any further.

    Ranges come first, sorted by their bounds. Opaque constraints are kept
    (without duplicates) in the order they were first seen.
    """
    ranges: list[VersionConstraint] = []
    opaque: list[VersionConstraint] = []

    for constraint in constraints:
        if constraint.is_simple_range_string():
            ranges.append(constraint)
        elif constraint in opaque:
            log.debug(f'Dropping duplicate constraint "{constraint}"')
        else:
            opaque.append(constraint)

    merged = True
    while merged:
        merged = False
        for i, j in combinations(range(len(ranges)), 2):
            left, right = ranges[i], ranges[j]
            if not left.can_merge_with(right):
                continue

            result = left.merge_with(right)
            log.debug(f'Merged "{left}" and "{right}" into "{result}"')
            ranges = [r for k, r in enumerate(ranges) if k not in (i, j)]
            ranges.append(result)
            merged = True
            break

    return sorted(ranges, key=_range_sort_key) + opaque


def conflict_string(
    constraints: Iterable[VersionConstraint], separator: str = "|"
) -> str:
    """Render constraints as a single conflict expression, e.g. ``<1.1|>=2.0,<2.3``."""
    return separator.join(str(c) for c in merge_constraints(constraints))
