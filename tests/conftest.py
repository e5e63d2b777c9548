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
from collections.abc import Iterator

import pytest

from advisory_constraints import VersionConstraint
from advisory_constraints.gh_logging import Logger, set_verbose


class MockLogger(Logger):
    """Logger that captures messages for testing."""

    def __init__(self):
        super().__init__("test")
        self.debug_messages: list[str] = []
        self.info_messages: list[str] = []
        self.warning_messages: list[str] = []
        self.error_messages: list[str] = []

    def _print(self, prefix: str, msg: str) -> None:
        if prefix == "debug":
            self.debug_messages.append(msg)
        elif prefix == "info":
            self.info_messages.append(msg)
        elif prefix == "warning":
            self.warning_messages.append(msg)
        elif prefix == "error":
            self.error_messages.append(msg)


@pytest.fixture
def mock_logger() -> MockLogger:
    """Create a mock logger for testing."""
    return MockLogger()


@pytest.fixture
def verbose() -> Iterator[None]:
    """Enable debug output for the duration of a test."""
    set_verbose(True)
    yield
    set_verbose(False)


@pytest.fixture(autouse=True)
def _no_github_actions(monkeypatch: pytest.MonkeyPatch) -> None:
    # Tests run in CI too; keep the local output format unless a test opts in.
    monkeypatch.delenv("GITHUB_ACTIONS", raising=False)
    monkeypatch.delenv("ADVISORY_CONSTRAINTS_VERBOSE", raising=False)


def vc(text: str) -> VersionConstraint:
    """Shorthand for VersionConstraint.from_string."""
    return VersionConstraint.from_string(text)
