#!/usr/bin/env python3

import argparse
import json
import sys

from lfp_logging import logs

from reggie_case import cases, configs, parsers
from reggie_case.errors import CaseError
from reggie_case.renderers import Style
from reggie_case.validators import Policy

LOG = logs.logger()


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reggie-case",
        description="Convert strings to camelCase, kebab-case or dot.case",
    )
    parser.add_argument(
        "values",
        nargs="+",
        metavar="VALUE",
        help="Strings to convert",
    )
    parser.add_argument(
        "--style",
        choices=[s.value for s in Style],
        default=configs.style().value,
        help=f"Target case style (env {configs.STYLE_NAME})",
    )
    parser.add_argument(
        "--policy",
        choices=[p.value for p in Policy],
        default=None,
        help=f"Validation policy, defaults to the style's own (env {configs.POLICY_NAME})",
    )
    parser.add_argument(
        "--dots",
        action=argparse.BooleanOptionalAction,
        default=configs.dots(),
        help=f"Split words on periods (env {configs.DOTS_NAME})",
    )
    parser.add_argument(
        "--tokens",
        action="store_true",
        help="Print the word tokens as JSON instead of the converted string",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    style = parsers.to_enum(Style, args.style)
    policy = (
        parsers.to_enum(Policy, args.policy)
        if args.policy
        else configs.policy(style)
    )
    failed = 0
    for value in args.values:
        try:
            if args.tokens:
                out = json.dumps(cases.words(value, policy, dots=args.dots, style=style))
            else:
                out = cases.convert(value, style, policy, dots=args.dots)
        except CaseError as e:
            failed += 1
            LOG.error(str(e))
            continue
        print(out)
    if failed:
        LOG.info(f"Converted {len(args.values) - failed} of {len(args.values)}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
