# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os
import sys

from .args import (
    add_generic_args, add_filename_args, add_strict_args, ConfigBackedParser,
    )
from .errors import TestFailedError
from .log import error
from .patch_format import to_operations
from .patching import apply_patch
from .utils import EXPLICIT_MISSING_FILE, read_json, write_json, setup_std_streams


_description = "Apply a JSON Patch to a JSON document."

# Exit status when a test operation of the patch does not hold
TEST_FAILED_STATUS = 2


def main_patch(args):
    base_filename = args.base
    patch_filename = args.patch
    output_filename = args.output

    for fn in (base_filename, patch_filename):
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            print("Missing file {}".format(fn))
            return 1

    try:
        before = read_json(base_filename)
        patch = read_json(patch_filename)
        patch = to_operations(patch if patch is not None else [])
        after = apply_patch(before, patch, strict=args.strict)
    except TestFailedError as e:
        error("%s", e)
        return TEST_FAILED_STATUS
    except ValueError as e:
        # Invalid patches and undecodable json files
        error("Could not apply patch: %s", e)
        return 1

    if output_filename:
        write_json(after, output_filename)
    else:
        print(json.dumps(after, indent=2, separators=(",", ": ")))

    return 0


def _build_arg_parser(prog='jpatch'):
    """Creates an argument parser for the jpatch command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        add_help=True,
        )
    add_generic_args(parser)
    add_strict_args(parser)
    add_filename_args(parser, ["base", "patch"])
    parser.add_argument(
        '-o', '--output',
        default=None,
        help="if supplied, the patched document is written "
             "to this file. Otherwise it is printed to the "
             "terminal.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_patch(arguments)


if __name__ == "__main__":
    sys.exit(main())
