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

from dataclasses import dataclass

from .version import Version


@dataclass(frozen=True)
class LowerBound:
    """Lowest version of a range, e.g. ``>=1.2`` or ``>1.2``."""

    version: Version
    inclusive: bool = False

    def admits(self, other: "LowerBound | None") -> bool:
        """True if every version above `other` is also above this bound.

        `None` means unbounded below, which no lower bound admits.
        """
        if other is None:
            return False

        if self.inclusive or not other.inclusive:
            return other.version.is_greater_or_equal_than(self.version)

        # ">1.0" does not admit ">=1.0"
        return other.version.is_greater_than(self.version)

    def is_below(self, version: Version) -> bool:
        return version.is_greater_than(self.version)

    def __str__(self) -> str:
        return (">=" if self.inclusive else ">") + str(self.version)


@dataclass(frozen=True)
class UpperBound:
    """Highest version of a range, e.g. ``<=4.5`` or ``<4.5``."""

    version: Version
    inclusive: bool = False

    def admits(self, other: "UpperBound | None") -> bool:
        if other is None:
            return False

        if self.inclusive or not other.inclusive:
            return self.version.is_greater_or_equal_than(other.version)

        return self.version.is_greater_than(other.version)

    def is_above(self, version: Version) -> bool:
        return self.version.is_greater_than(version)

    def __str__(self) -> str:
        return ("<=" if self.inclusive else "<") + str(self.version)
