"""Exceptions raised while building or evaluating version requirements."""


class InvalidRequirementFormatError(ValueError):
    """Raised when a requirement string cannot be turned into a clause tree.

    Args:
        requirement: The offending text. This is the whole raw requirement for
            syntax errors, or the re-rendered version fragment for semantic
            violations such as ``1.x.3``.
    """

    def __init__(self, requirement: str):
        self.requirement = requirement
        super().__init__(f"Invalid requirement format: '{requirement}'")


class InvalidVersionError(ValueError):
    """Raised when a candidate version string is not valid SemVer."""

    def __init__(self, version: str):
        self.version = version
        super().__init__(f"Invalid version: '{version}'")
