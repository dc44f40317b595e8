# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import datetime
import os
import pprint
import sys

import colorama

from .errors import PatchError
from .log import warning
from .patch_format import PatchOp, TRANSFER_OPS, target_field
from .patching import apply_operation
from .pointer import JsonPointer
from .utils import clone_value, value_kind


# Indentation offset in pretty-print
IND = "  "

# Max line width used some places in pretty-print
MAXWIDTH = 78

# Sentinel to allow None as a value
Missing = object()


ColoredConstants = namedtuple('ColoredConstants', (
    'KEEP',
    'REMOVE',
    'ADD',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        KEEP   = '{color}   '.format(color=''),
        REMOVE = '{color}-  '.format(color=colorama.Fore.RED),
        ADD    = '{color}+  '.format(color=colorama.Fore.GREEN),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        KEEP   = '   ',
        REMOVE = '-  ',
        ADD    = '+  ',
        INFO   = '## ',
        RESET  = '',
    )
}


class PrettyPrintConfig:
    def __init__(self, out=sys.stdout, use_color=True):
        self.out = out
        self.use_color = use_color

    @property
    def KEEP(self):
        return col_const[self.use_color].KEEP

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET

DefaultConfig = PrettyPrintConfig()


def file_timestamp(filename):
    "Return modification time for filename as a string."
    if os.path.exists(filename):
        t = os.path.getmtime(filename)
        dt = datetime.datetime.fromtimestamp(t)
        return dt.isoformat(str(" "))
    else:
        return "(no timestamp)"


def format_value(v):
    "Format simple value for printing."
    if isinstance(v, str):
        return v
    return pprint.pformat(v)


def pretty_print_value(value, prefix="", config=DefaultConfig):
    """Print a possibly complex value with all lines prefixed.

    Calls out to generic formatters based on value
    type for dicts, lists, and multiline strings.
    Uses format_value for simple values.
    """
    if isinstance(value, dict) and value:
        pretty_print_dict(value, (), prefix, config)
    elif isinstance(value, list) and value:
        pretty_print_list(value, prefix, config)
    else:
        pretty_print_multiline(format_value(value), prefix, config)


def pretty_print_key(k, prefix, config):
    config.out.write("%s%s:\n" % (prefix, k))


def pretty_print_key_value(k, v, prefix, config):
    config.out.write("%s%s: %s\n" % (prefix, k, v))


def pretty_print_patch_action(msg, path, config):
    config.out.write("%s%s %s:%s\n" % (config.INFO, msg, path, config.RESET))


def pretty_print_item(k, v, prefix="", config=DefaultConfig):
    if isinstance(v, dict) and v:
        pretty_print_key(k, prefix, config)
        pretty_print_dict(v, (), prefix+IND, config)
    elif isinstance(v, list) and v:
        pretty_print_key(k, prefix, config)
        pretty_print_list(v, prefix+IND, config)
    else:
        vstr = format_value(v)
        if "\n" in vstr:
            # Multiline strings
            pretty_print_key(k, prefix, config)
            for line in vstr.splitlines(False):
                config.out.write("%s%s\n" % (prefix+IND, line))
        else:
            # Singleline strings
            pretty_print_key_value(k, vstr, prefix, config)


def pretty_print_multiline(text, prefix="", config=DefaultConfig):
    assert isinstance(text, str), 'expected string argument'

    # Preprend prefix to lines, letting lines keep their own newlines
    lines = text.splitlines(True)
    for line in lines:
        config.out.write(prefix + line)

    # Make sure output ends with a newline
    if not lines or not lines[-1].endswith("\n"):
        config.out.write("\n")


def pretty_print_list(li, prefix="", config=DefaultConfig):
    listr = pprint.pformat(li)
    if len(listr) < MAXWIDTH - len(prefix) and "\\n" not in listr:
        config.out.write("%s%s\n" % (prefix, listr))
    else:
        for k, v in enumerate(li):
            pretty_print_item("item[%d]" % k, v, prefix, config)


def pretty_print_dict(d, exclude_keys=(), prefix="", config=DefaultConfig):
    """Pretty-print a dict without wrapper keys

    Instead of {'key': 'value'}, do

        key: value
        key:
          long
          value

    """
    for k in sorted(set(d) - set(exclude_keys)):
        v = d[k]
        pretty_print_item(k, v, prefix, config)


def _lookup(doc, path):
    if doc is Missing:
        return Missing
    try:
        return JsonPointer.from_string(path).traverse(doc)
    except PatchError:
        return Missing


def pretty_print_operation(doc, e, config=DefaultConfig):
    """Pretty-print a single patch operation.

    doc is the document the operation applies to, or Missing when
    unknown. Values replaced or removed are only shown when doc is known.
    """
    op = e["op"]

    if op in TRANSFER_OPS:
        to = e[target_field(e)]
        pretty_print_patch_action(
            "%s %s to" % ("moved" if op == PatchOp.MOVE else "copied", e["from"]),
            to, config)
        value = _lookup(doc, e["from"])
        if value is not Missing:
            pretty_print_value(value, config.KEEP, config)

    elif op == PatchOp.ADD:
        pretty_print_patch_action("added", e["path"], config)
        pretty_print_value(e["value"], config.ADD, config)

    elif op == PatchOp.REMOVE:
        pretty_print_patch_action("removed", e["path"], config)
        old = _lookup(doc, e["path"])
        if old is not Missing:
            pretty_print_value(old, config.REMOVE, config)

    elif op == PatchOp.REPLACE:
        old = _lookup(doc, e["path"])
        new = e["value"]
        typechange = ""
        if old is not Missing and value_kind(old) != value_kind(new):
            typechange = " (type changed from %s to %s)" % (
                value_kind(old), value_kind(new))
        pretty_print_patch_action("replaced" + typechange, e["path"], config)
        if old is not Missing:
            pretty_print_value(old, config.REMOVE, config)
        pretty_print_value(new, config.ADD, config)

    elif op == PatchOp.TEST:
        pretty_print_patch_action("tested", e["path"], config)
        pretty_print_value(e["value"], config.KEEP, config)

    config.out.write(config.RESET)


def pretty_print_patch(patch, base=Missing, config=DefaultConfig):
    """Pretty-print a patch, one block per operation.

    If base is given, each operation is applied to a copy of it as
    printing proceeds, so that removed and replaced values can be shown.
    """
    doc = Missing if base is Missing else clone_value(base)
    for e in patch:
        pretty_print_operation(doc, e, config)
        if doc is not Missing:
            try:
                doc = apply_operation(doc, e)
            except PatchError as err:
                warning("Cannot track document past operation %r: %s", e["op"], err)
                doc = Missing


json_diff_header = """\
jdiff {afn} {bfn}
--- {afn}{atime}
+++ {bfn}{btime}
"""

def pretty_print_json_diff(afn, bfn, a, patch, config=DefaultConfig):
    """Pretty-print a patch between two json files

    Parameters
    ----------

    afn: str
        Filename of a, the base document
    bfn: str
        Filename of b, the updated document
    a: json value
        The base document
    patch: list of PatchOperation
        The patch transforming a into b
    config: PrettyPrintConfig
        Config object determining how output is rendered and where
    """
    if patch:
        atime = "  " + file_timestamp(afn)
        btime = "  " + file_timestamp(bfn)
        config.out.write(json_diff_header.format(
            afn=afn, bfn=bfn, atime=atime, btime=btime))
        pretty_print_patch(patch, a, config)
