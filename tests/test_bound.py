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

from advisory_constraints.bound import LowerBound, UpperBound
from advisory_constraints.version import Version


def lower(version: str, inclusive: bool) -> LowerBound:
    return LowerBound(Version(version), inclusive)


def upper(version: str, inclusive: bool) -> UpperBound:
    return UpperBound(Version(version), inclusive)


class TestLowerBound:
    def test_admits_higher_bound(self):
        assert lower("1.0", True).admits(lower("1.1", False))
        assert lower("1.0", False).admits(lower("1.1", True))
        assert not lower("1.1", True).admits(lower("1.0", True))

    def test_admits_same_version(self):
        assert lower("1.0", True).admits(lower("1.0", True))
        assert lower("1.0", False).admits(lower("1.0", False))
        assert lower("1.0", True).admits(lower("1.0", False))
        # an exclusive bound cannot admit the version itself
        assert not lower("1.0", False).admits(lower("1.0", True))

    def test_never_admits_unbounded(self):
        assert not lower("0", True).admits(None)

    def test_is_below(self):
        assert lower("1.0", True).is_below(Version("1.0.1"))
        assert not lower("1.0", True).is_below(Version("1.0"))

    def test_str(self):
        assert str(lower("1.2", True)) == ">=1.2"
        assert str(lower("1.2", False)) == ">1.2"


class TestUpperBound:
    def test_admits_lower_bound(self):
        assert upper("2.0", False).admits(upper("1.9", True))
        assert not upper("1.9", True).admits(upper("2.0", False))

    def test_admits_same_version(self):
        assert upper("2.0", True).admits(upper("2.0", False))
        assert upper("2.0", False).admits(upper("2.0", False))
        assert not upper("2.0", False).admits(upper("2.0", True))

    def test_never_admits_unbounded(self):
        assert not upper("99", True).admits(None)

    def test_is_above(self):
        assert upper("2.0", False).is_above(Version("1.9"))
        assert not upper("2.0", True).is_above(Version("2.0.0"))

    def test_str(self):
        assert str(upper("4.5.6", True)) == "<=4.5.6"
        assert str(upper("4.5.6", False)) == "<4.5.6"
