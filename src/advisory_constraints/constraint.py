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

"""
Version range constraints as found in security advisories, e.g. ">=1.2.3,<4.5.6".

A constraint is either a single contiguous range (`RangeConstraint`) or, when the
text is anything more elaborate, the verbatim text (`OpaqueConstraint`). Only
ranges can be compared with each other; opaque constraints never contain,
overlap or merge with anything.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .bound import LowerBound, UpperBound
from .version import Version

_VERSION = r"((?:[0-9]+\.)*[0-9]+)"

CLOSED_RANGE_RE = re.compile(
    rf">(=?)\s*{_VERSION}\s*,\s*<(=?)\s*{_VERSION}", re.ASCII
)
LEFT_OPEN_RANGE_RE = re.compile(rf"<(=?)\s*{_VERSION}", re.ASCII)
RIGHT_OPEN_RANGE_RE = re.compile(rf">(=?)\s*{_VERSION}", re.ASCII)


class ConstraintMergeError(ValueError):
    """Raised when merging two constraints that neither contain nor overlap each other."""

    def __init__(
        self, message: str, left: "VersionConstraint", right: "VersionConstraint"
    ) -> None:
        super().__init__(message)
        self.left = left
        self.right = right


class VersionConstraint(ABC):
    """Common interface of `RangeConstraint` and `OpaqueConstraint`.

    Use `VersionConstraint.from_string` to create instances.
    """

    @staticmethod
    def from_string(text: str) -> "VersionConstraint":
        """Parse a constraint; text that is not a simple range is kept verbatim."""
        if m := CLOSED_RANGE_RE.fullmatch(text):
            return RangeConstraint(
                lower=LowerBound(Version(m.group(2)), inclusive=bool(m.group(1))),
                upper=UpperBound(Version(m.group(4)), inclusive=bool(m.group(3))),
            )

        if m := LEFT_OPEN_RANGE_RE.fullmatch(text):
            return RangeConstraint(
                upper=UpperBound(Version(m.group(2)), inclusive=bool(m.group(1)))
            )

        if m := RIGHT_OPEN_RANGE_RE.fullmatch(text):
            return RangeConstraint(
                lower=LowerBound(Version(m.group(2)), inclusive=bool(m.group(1)))
            )

        return OpaqueConstraint(text)

    @abstractmethod
    def is_simple_range_string(self) -> bool: ...

    @property
    @abstractmethod
    def constraint_string(self) -> str: ...

    @property
    def lower_bound(self) -> Version | None:
        return None

    @property
    def lower_bound_included(self) -> bool:
        return False

    @property
    def upper_bound(self) -> Version | None:
        return None

    @property
    def upper_bound_included(self) -> bool:
        return False

    def contains(self, other: "VersionConstraint") -> bool:
        return False

    def overlaps_with(self, other: "VersionConstraint") -> bool:
        return False

    def can_merge_with(self, other: "VersionConstraint") -> bool:
        return (
            self.contains(other)
            or other.contains(self)
            or self.overlaps_with(other)
            or other.overlaps_with(self)
        )

    def merge_with(self, other: "VersionConstraint") -> "VersionConstraint":
        """Return a constraint covering both `self` and `other`.

        If one contains the other, the containing instance itself is returned.
        Raises ConstraintMergeError if `can_merge_with` is False.
        """
        if self.contains(other):
            return self

        if other.contains(self):
            return other

        if self.overlaps_with(other):
            return _merge_overlapping(self, other)

        if other.overlaps_with(self):
            return _merge_overlapping(other, self)

        raise ConstraintMergeError(
            f'Cannot merge {type(self).__name__} "{self}" '
            f'with {type(other).__name__} "{other}"',
            self,
            other,
        )

    def try_merge_with(self, other: "VersionConstraint") -> "VersionConstraint | None":
        """Like `merge_with`, but returns None instead of raising."""
        try:
            return self.merge_with(other)
        except ConstraintMergeError:
            return None

    def __str__(self) -> str:
        return self.constraint_string


@dataclass(frozen=True)
class RangeConstraint(VersionConstraint):
    # None means unbounded on that side
    lower: LowerBound | None = None
    upper: UpperBound | None = None

    def is_simple_range_string(self) -> bool:
        return True

    @property
    def constraint_string(self) -> str:
        parts = [str(b) for b in (self.lower, self.upper) if b is not None]
        # no bounds at all: any version
        return ",".join(parts) or "*"

    @property
    def lower_bound(self) -> Version | None:
        return self.lower.version if self.lower else None

    @property
    def lower_bound_included(self) -> bool:
        return self.lower.inclusive if self.lower else False

    @property
    def upper_bound(self) -> Version | None:
        return self.upper.version if self.upper else None

    @property
    def upper_bound_included(self) -> bool:
        return self.upper.inclusive if self.upper else False

    def contains(self, other: VersionConstraint) -> bool:
        if not isinstance(other, RangeConstraint):
            return False

        return (self.lower is None or self.lower.admits(other.lower)) and (
            self.upper is None or self.upper.admits(other.upper)
        )

    def strictly_contains(self, version: Version | None) -> bool:
        """True if `version` lies strictly between the bounds of this range."""
        if version is None:
            return False

        return (self.lower is None or self.lower.is_below(version)) and (
            self.upper is None or self.upper.is_above(version)
        )

    def overlaps_with(self, other: VersionConstraint) -> bool:
        """True if exactly one bound of `other` lies strictly inside this range.

        A range containing the other (or contained by it) does not overlap it.
        """
        if not isinstance(other, RangeConstraint):
            return False

        if self.contains(other) or other.contains(self):
            return False

        return self.strictly_contains(other.lower_bound) != self.strictly_contains(
            other.upper_bound
        )


@dataclass(frozen=True)
class OpaqueConstraint(VersionConstraint):
    text: str

    def is_simple_range_string(self) -> bool:
        return False

    @property
    def constraint_string(self) -> str:
        return self.text


def _merge_overlapping(a: VersionConstraint, b: VersionConstraint) -> RangeConstraint:
    if not (
        isinstance(a, RangeConstraint)
        and isinstance(b, RangeConstraint)
        and a.overlaps_with(b)
    ):
        raise ConstraintMergeError(
            f'{type(a).__name__} "{a}" does not overlap with {type(b).__name__} "{b}"',
            a,
            b,
        )

    if a.strictly_contains(b.lower_bound):
        # b reaches past the upper end of a
        return RangeConstraint(lower=a.lower, upper=b.upper)

    return RangeConstraint(lower=b.lower, upper=a.upper)
