class FullnameParserError(Exception):
    """Base exception for everything around the parser (config, CLI input)."""


class ConfigError(FullnameParserError):
    """Raised when the YAML configuration exists but cannot be used."""


class BatchInputError(FullnameParserError):
    """Raised when a batch input file cannot be read as UTF-8 text."""
