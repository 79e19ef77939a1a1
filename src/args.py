"""Argument parsing functionality for npmrange."""

import argparse
from constants import Constants


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog=Constants.PROG,
        description=(
            "npmrange - Check versions against NPM semver requirements"
        ),
        add_help=True,
    )

    parser.add_argument("requirement",
                        metavar="REQUIREMENT",
                        help="NPM requirement, e.g. '^1.2.3 || >=2.0.0 <3.0.0'",
                        type=str)
    parser.add_argument("versions",
                        metavar="VERSION",
                        help="Candidate versions to check",
                        nargs="*",
                        type=str)
    parser.add_argument("-l", "--load_list",
                        dest="LIST_FROM_FILE",
                        help="Load candidate versions from a file, one per line",
                        action="append", type=str,
                        default=[])
    parser.add_argument("-f", "--format",
                        dest="OUTPUT_FORMAT",
                        help="Output format (text or json, default: text)",
                        action="store",
                        type=str.lower,
                        choices=Constants.OUTPUT_FORMATS,
                        default="text")
    parser.add_argument("--max",
                        dest="MAX",
                        help="Print only the highest satisfying version.",
                        action="store_true")
    parser.add_argument("--include-prerelease",
                        dest="INCLUDE_PRERELEASE",
                        help="Allow pre-release versions to match any range.",
                        action="store_true")
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to a YAML or JSON config file",
                        action="store",
                        type=str)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=Constants.LOG_LEVELS)
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("-q", "--quiet",
                        dest="QUIET",
                        help="Do not output to console.",
                        action="store_true")

    return parser.parse_args(argv)
