# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

from .args import (
    add_generic_args, add_filename_args, add_prettyprint_args,
    ConfigBackedParser, prettyprint_config_from_args,
    )
from .log import error
from .patch_format import to_operations
from .prettyprint import pretty_print_patch
from .utils import read_json, setup_std_streams


_description = "Show a JSON Patch in a terminal friendly format."


def main_show(args):
    fn = args.patch
    if not os.path.exists(fn):
        print("Missing file {}".format(fn))
        return 1

    try:
        patch = to_operations(read_json(fn))
    except ValueError as e:
        error("Invalid patch %s: %s", fn, e)
        return 1

    # This printer is to keep the unit tests passing,
    # some tests capture output with capsys which doesn't
    # pick up on sys.stdout.write()
    class Printer:
        def write(self, text):
            print(text, end="")

    config = prettyprint_config_from_args(args, out=Printer())
    pretty_print_patch(patch, config=config)
    return 0


def _build_arg_parser(prog='jshow'):
    """Creates an argument parser for the jshow command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_prettyprint_args(parser)
    add_filename_args(parser, ["patch"])
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_show(arguments)


if __name__ == "__main__":
    sys.exit(main())
