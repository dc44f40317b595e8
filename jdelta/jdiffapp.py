# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os
import sys

from .args import (
    add_generic_args, add_filename_args, add_prettyprint_args,
    ConfigBackedParser, prettyprint_config_from_args,
    )
from .diffing import diff
from .errors import DiffError
from .log import error
from .prettyprint import pretty_print_json_diff
from .utils import EXPLICIT_MISSING_FILE, read_json, setup_std_streams


_description = "Compute the JSON Patch between two JSON documents."


def main_diff(args):
    """Main handler of diff CLI"""
    base = args.base
    remote = args.remote
    output = getattr(args, 'out', None)

    # Check that if args are filenames they either exist, or are
    # explicitly marked as missing (added/removed):
    for fn in (base, remote):
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            print("Missing file {}".format(fn))
            return 1

    try:
        a = read_json(base)
        b = read_json(remote)
    except ValueError as e:
        error("Could not read JSON input: %s", e)
        return 1

    try:
        d = diff(a, b)
    except DiffError as e:
        error("%s", e)
        return 1

    # Output as JSON to file, or print to stdout:
    if output:
        with open(output, "w") as df:
            json.dump(d, df, indent=2, separators=(",", ": "))
    else:
        # This printer is to keep the unit tests passing,
        # some tests capture output with capsys which doesn't
        # pick up on sys.stdout.write()
        class Printer:
            def write(self, text):
                print(text, end="")
        config = prettyprint_config_from_args(args, out=Printer())
        pretty_print_json_diff(base, remote, a, d, config)

    return 0


def _build_arg_parser(prog='jdiff'):
    """Creates an argument parser for the jdiff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_prettyprint_args(parser)
    add_filename_args(parser, ["base", "remote"])

    parser.add_argument(
        '--out',
        default=None,
        help="if supplied, the patch is written to this file. "
             "Otherwise it is printed to the terminal.")

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
