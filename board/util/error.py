"""Utility layer errors."""


class UtilError(Exception):
    """Raised by infrastructure helpers outside the domain."""


class ConfigurationError(UtilError):
    """Settings that cannot work together, detected at startup."""
