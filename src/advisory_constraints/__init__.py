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

from .bound import LowerBound, UpperBound
from .conflicts import conflict_string, merge_constraints
from .constraint import (
    ConstraintMergeError,
    OpaqueConstraint,
    RangeConstraint,
    VersionConstraint,
)
from .version import InvalidVersionError, Version

__all__ = [
    "ConstraintMergeError",
    "InvalidVersionError",
    "LowerBound",
    "OpaqueConstraint",
    "RangeConstraint",
    "UpperBound",
    "Version",
    "VersionConstraint",
    "conflict_string",
    "merge_constraints",
]
