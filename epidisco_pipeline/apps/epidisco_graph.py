# -*- coding: utf-8 -*-
"""Tool for building the pipeline graph for a parameters file

The graph is recorded without running anything and written as a summary, a Graphviz DOT file,
or a YAML node list.
"""

import argparse
import io
import sys

import ruamel.yaml as ruamel_yaml

from .. import __version__
from ..base import InvalidConfiguration, load_parameters_files, print_config
from ..models.parameters import construct_run_directory, construct_run_name
from ..workflows.pipeline import run as run_pipeline
from .impl.logging import LVL_ERROR, LVL_INFO, LVL_SUCCESS, log, setup_logging

#: Output formats
FORMATS = ("summary", "dot", "yaml")


def format_summary(graph):
    """Return node counts and persisted names of ``graph``"""
    lines = ["Nodes: {}".format(len(graph)), "", "Operations:"]
    for operation, count in sorted(graph.operations().items()):
        lines.append("  {:<28} {}".format(operation, count))
    lines += ["", "Saved:"]
    lines += ["  {}".format(name) for name in graph.saved]
    return "\n".join(lines) + "\n"


def format_yaml(graph):
    yaml = ruamel_yaml.YAML()
    with io.StringIO() as out:
        yaml.dump(graph.to_dict(), stream=out)
        return out.getvalue()


def run(args):
    """Load parameters, build and write the graph"""
    setup_logging(args.verbose)
    try:
        parameters = load_parameters_files(args.parameters)
    except InvalidConfiguration as e:
        log("{msg}", args={"msg": e}, level=LVL_ERROR)
        return 1
    if args.verbose:
        print_config(parameters)

    log("Run name:      {name}", args={"name": construct_run_name(parameters)}, level=LVL_INFO)
    log("Run directory: {dir}", args={"dir": construct_run_directory(parameters)}, level=LVL_INFO)

    graph = run_pipeline(parameters)
    if args.format == "dot":
        text = graph.to_dot(construct_run_name(parameters))
    elif args.format == "yaml":
        text = format_yaml(graph)
    else:
        text = format_summary(graph)

    if args.output:
        with open(args.output, "wt") as outputf:
            outputf.write(text)
        log("Wrote graph to {path}", args={"path": args.output}, level=LVL_SUCCESS)
    else:
        sys.stdout.write(text)
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="Build the epidisco pipeline graph")

    parser.add_argument(
        "--version",
        action="version",
        version="%%(prog)s %s" % __version__,
        help="Show version and exit",
    )

    parser.add_argument(
        "parameters",
        metavar="PARAMS.yaml",
        nargs="+",
        help="Parameter files, later files are merged over earlier ones",
    )

    parser.add_argument(
        "--format", choices=FORMATS, default="summary", help="Output format, default: summary"
    )

    parser.add_argument("--output", "-o", help="Write to this file instead of stdout")

    parser.add_argument(
        "--verbose", "-v", default=False, action="store_true", help="Enable verbose mode"
    )

    args = parser.parse_args(argv)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
