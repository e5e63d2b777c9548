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

import argparse
import os
import sys

from .conflicts import conflict_string
from .constraint import VersionConstraint
from .gh_logging import VERBOSE_ENV_VAR, Logger, set_verbose

log = Logger(__name__)


def parse_args(args: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Merge version constraints into a single conflict string."
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help=f"Print debug output; also enabled by ${VERBOSE_ENV_VAR}.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail if any constraint is not a simple version range.",
    )
    parser.add_argument(
        "--separator",
        type=str,
        default="|",
        help="Separator placed between the resulting constraints (default: '|').",
    )
    parser.add_argument(
        "constraints",
        nargs="*",
        help="Constraints such as '>=1.2,<1.4'. A single argument may hold several "
        "constraints separated by '|'. If not provided, constraints are read "
        "from stdin, one per line.",
    )
    return parser.parse_args(args)


def read_constraint_strings(args: argparse.Namespace) -> list[str]:
    """Collect constraint strings from the command line, or stdin if there are none."""
    raw = args.constraints if args.constraints else sys.stdin.read().splitlines()

    result: list[str] = []
    for item in raw:
        result.extend(part.strip() for part in item.split("|") if part.strip())
    return result


def main(args: list[str]) -> None:
    """Main entry point: prints the merged constraints to stdout."""
    p = parse_args(args)
    log.warnings.clear()
    set_verbose(p.verbose or bool(os.getenv(VERBOSE_ENV_VAR)))

    texts = read_constraint_strings(p)
    if not texts:
        log.fatal("No constraints given.")

    constraints = [VersionConstraint.from_string(t) for t in texts]
    log.debug(f"Read {len(constraints)} constraints.")

    if p.strict:
        for c in constraints:
            if not c.is_simple_range_string():
                log.warning(f'"{c}" is not a simple version range; kept verbatim.')

    print(conflict_string(constraints, separator=p.separator))

    if log.warnings:
        # If any warnings were issued, exit with non-zero code
        log.fatal(f"Completed with {len(log.warnings)} warnings.")


def cli() -> None:
    main(args=sys.argv[1:])


if __name__ == "__main__":
    cli()
