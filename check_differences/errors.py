"""
Shared error types.

Kept in a separate module so the CLI, the pipeline and every backend raise
and catch the same exception classes.
"""


class CheckDifferencesError(Exception):
    """Base exception for the checker"""
    pass


class UsageError(CheckDifferencesError):
    """Bad invocation (e.g. fewer than two files)"""
    pass


class MissingArtifactError(CheckDifferencesError):
    """Input file does not exist or cannot be read"""

    def __init__(self, message: str, identifier: str = ""):
        super().__init__(message)
        self.identifier = identifier


class ConfigurationError(CheckDifferencesError):
    """Selected backend lacks its credential or external tool"""
    pass


class TransportError(CheckDifferencesError):
    """Network or subprocess failure while talking to a backend"""
    pass


class ParseError(CheckDifferencesError):
    """Backend response could not be decoded"""
    pass
