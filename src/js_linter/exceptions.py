class PaddingLinesError(Exception):
    """Base class for padding-lines errors"""


class ConfigError(PaddingLinesError):
    """Raised when a rule configuration is invalid"""
