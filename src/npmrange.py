"""npmrange - Check versions against NPM semver requirements.

    Returns:
        int: Exit code
"""
import json
import logging
import os
import sys
from typing import Any, Dict, List

from args import parse_args
from cli_config import Settings, load_config, resolve_settings
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from constants import Constants, ExitCodes, OutputFormats
from versioning import InvalidRequirementFormatError, InvalidVersionError, NpmVersionRequirement

logger = logging.getLogger(__name__)


def load_versions_file(file_name):
    """Loads candidate versions from a file.

    Args:
        file_name (str): File path containing one version per line.

    Returns:
        list: Non-empty, non-comment lines
    """
    try:
        with open(file_name, encoding='utf-8') as file:
            return [line.strip() for line in file if line.strip() and not line.strip().startswith("#")]
    except FileNotFoundError as e:
        logging.error("File not found: %s, aborting", e)
        sys.exit(ExitCodes.FILE_ERROR.value)
    except IOError as e:
        logging.error("IO error: %s, aborting", e)
        sys.exit(ExitCodes.FILE_ERROR.value)


def setup_logging(args, settings: Settings) -> None:
    """Configure logging from effective settings and --logfile."""
    os.environ[Constants.ENV_LOG_LEVEL] = settings.log_level
    configure_logging()

    log_file = getattr(args, "LOG_FILE", None)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(Constants.LOG_FILE_FORMAT))
        logging.getLogger().addHandler(file_handler)
        logger.info("Logging to file: %s", log_file)


def build_versions(args) -> List[str]:
    """Collect candidate versions from positional args and list files."""
    versions = list(args.versions or [])
    for file_name in args.LIST_FROM_FILE or []:
        versions.extend(load_versions_file(file_name))
    return versions


def check_versions(requirement: NpmVersionRequirement, versions: List[str]) -> List[Dict[str, Any]]:
    """Evaluate each candidate and return one result row per version."""
    results = []
    for version in versions:
        try:
            satisfied = requirement.is_satisfied_by(version)
            results.append({"version": version, "satisfied": satisfied, "error": None})
        except InvalidVersionError as e:
            logger.warning("%s", e)
            results.append({"version": version, "satisfied": False, "error": str(e)})
    return results


def _emit(args, text: str) -> None:
    if not args.QUIET:
        print(text)


def run(argv=None) -> int:
    """Run the CLI and return an exit code."""
    args = parse_args(argv)
    settings = resolve_settings(args, load_config(getattr(args, "CONFIG", None)))
    setup_logging(args, settings)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action="run",
                                include_prerelease=settings.include_prerelease)
        )

    try:
        requirement = NpmVersionRequirement(args.requirement, include_prerelease=settings.include_prerelease)
    except InvalidRequirementFormatError as e:
        logger.error("%s", e)
        return ExitCodes.INVALID_REQUIREMENT.value

    versions = build_versions(args)
    as_json = args.OUTPUT_FORMAT == OutputFormats.JSON.value

    if args.MAX:
        best = requirement.max_satisfying(versions)
        if as_json:
            _emit(args, json.dumps({
                "requirement": requirement.raw,
                "include_prerelease": requirement.include_prerelease,
                "max_satisfying": str(best) if best is not None else None,
            }, indent=2))
        elif best is not None:
            _emit(args, str(best))
        return ExitCodes.SUCCESS.value if best is not None else ExitCodes.NO_MATCH.value

    if not versions:
        # Nothing to check: report the translated ranges.
        if as_json:
            _emit(args, json.dumps({"requirement": requirement.raw, "ranges": str(requirement.clause)}, indent=2))
        else:
            _emit(args, str(requirement.clause))
        return ExitCodes.SUCCESS.value

    results = check_versions(requirement, versions)
    if as_json:
        _emit(args, json.dumps({
            "requirement": requirement.raw,
            "include_prerelease": requirement.include_prerelease,
            "results": results,
        }, indent=2))
    else:
        for row in results:
            verdict = "satisfies" if row["satisfied"] else "does not satisfy"
            _emit(args, f"{row['version']} {verdict} {requirement.raw}")

    if all(row["satisfied"] for row in results):
        return ExitCodes.SUCCESS.value
    return ExitCodes.NO_MATCH.value


def main():
    """Main function of the program."""
    sys.exit(run())


if __name__ == "__main__":
    main()
