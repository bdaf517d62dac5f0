"""Domain errors and failure typing."""


class LocaleRadixError(Exception):
    """Base class for tooling failures around the sorter."""

    error_code = "LOCALE_RADIX_ERROR"


class ConfigError(LocaleRadixError):
    """Raised for invalid or missing configuration."""

    error_code = "CONFIG_ERROR"


class InputError(LocaleRadixError):
    """Raised when input records cannot be read or keyed."""

    error_code = "INPUT_ERROR"
