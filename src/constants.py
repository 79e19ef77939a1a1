"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    INVALID_REQUIREMENT = 2
    NO_MATCH = 3


class OutputFormats(Enum):
    """Output formats supported by the CLI.

    Args:
        Enum (string): Output formats supported by the CLI.
    """

    TEXT = "text"
    JSON = "json"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    PROG = "npmrange"
    INCLUDE_PRERELEASE = False
    LOG_LEVEL = "INFO"
    LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
    OUTPUT_FORMATS = [OutputFormats.TEXT.value, OutputFormats.JSON.value]

    # Environment overrides
    ENV_LOG_LEVEL = "NPMRANGE_LOG_LEVEL"
    ENV_INCLUDE_PRERELEASE = "NPMRANGE_INCLUDE_PRERELEASE"

    # Config file discovery (first existing wins)
    CONFIG_SECTION = "npmrange"
    DEFAULT_CONFIG_PATHS = [
        "npmrange.yml",
        "npmrange.yaml",
        "~/.config/npmrange/npmrange.yml",
    ]
