"""
Client configuration.

Credentials are supplied programmatically by the embedding application.
`load_credentials_from_env` is a convenience for scripts that keep them in
environment variables.
"""

import os
from typing import Mapping, Optional

from quoinex.infrastructure.exceptions.system import ConfigurationError
from .structs import DEFAULT_BASE_URL, LiquidCredentials, NetworkConfig, LiquidConfig

TOKEN_ID_ENV = "QUOINEX_API_TOKEN_ID"
SECRET_ENV = "QUOINEX_API_SECRET"


def load_credentials_from_env(token_var: str = TOKEN_ID_ENV, secret_var: str = SECRET_ENV,
                              environ: Optional[Mapping[str, str]] = None) -> LiquidCredentials:
    """
    Read API credentials from environment variables.

    Raises:
        ConfigurationError: If a variable is missing or empty
    """
    environ = os.environ if environ is None else environ

    token_id = environ.get(token_var, "")
    if not token_id:
        raise ConfigurationError(f"{token_var} is not set", setting_name=token_var)

    secret = environ.get(secret_var, "")
    if not secret:
        raise ConfigurationError(f"{secret_var} is not set", setting_name=secret_var)

    return LiquidCredentials(api_token_id=token_id, api_secret=secret)


__all__ = [
    "DEFAULT_BASE_URL",
    "LiquidCredentials",
    "NetworkConfig",
    "LiquidConfig",
    "load_credentials_from_env",
]
