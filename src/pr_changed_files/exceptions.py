"""
Exceptions

PR changed files 도구의 예외 계층
"""


class PRChangedFilesError(Exception):
    """Base error for a failed run."""


class ConfigurationError(PRChangedFilesError):
    """Invalid configuration values"""


class MalformedResponseError(PRChangedFilesError):
    """API response does not have the expected shape"""
