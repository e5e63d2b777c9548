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

import os
import sys
from typing import NoReturn

VERBOSE_ENV_VAR = "ADVISORY_CONSTRAINTS_VERBOSE"


def is_running_in_github_actions() -> bool:
    return "GITHUB_ACTIONS" in os.environ


class Logger:
    """Minimal logger writing to stderr, with GitHub Actions annotations when in CI.

    stdout is reserved for results, so nothing here ever prints there.
    """

    # Shared by all loggers; debug output is dropped unless set.
    verbose: bool = False

    def __init__(self, name: str):
        self.name = name
        self.warnings: list[str] = []

    def _print(self, prefix: str, msg: str) -> None:
        if is_running_in_github_actions():
            github_prefix = {
                "info": "notice",
                "success": "notice",
            }
            print(
                f"::{github_prefix.get(prefix, prefix)}::{self.name} {msg}",
                file=sys.stderr,
            )
            return

        print(f"{prefix.upper()}: {self.name} {msg}", file=sys.stderr)

    def debug(self, msg: str) -> None:
        if Logger.verbose:
            self._print("debug", msg)

    def info(self, msg: str) -> None:
        self._print("info", msg)

    def ok(self, msg: str) -> None:
        self._print("success", msg)

    def warning(self, msg: str) -> None:
        self.warnings.append(msg)
        self._print("warning", msg)

    def fatal(self, msg: str) -> NoReturn:
        self._print("error", msg)
        raise SystemExit(1)


def set_verbose(enabled: bool) -> None:
    Logger.verbose = enabled
