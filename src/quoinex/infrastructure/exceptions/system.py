from typing import Optional


class ConfigurationError(Exception):
    """Configuration-specific exception for setup errors."""

    def __init__(self, message: str, setting_name: Optional[str] = None):
        self.setting_name = setting_name
        super().__init__(message)


class ClientConstructionError(ConfigurationError):
    """Client could not be created from the supplied credentials or base URL."""
    pass
