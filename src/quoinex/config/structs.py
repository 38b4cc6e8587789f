from msgspec import Struct, field
from yarl import URL

from quoinex.infrastructure.exceptions.system import ClientConstructionError

DEFAULT_BASE_URL = "https://api.liquid.com"


class LiquidCredentials(Struct, frozen=True):
    """Liquid API token credentials."""
    api_token_id: str
    api_secret: str

    def get_preview(self) -> str:
        """Get safe preview of the token id for logging."""
        if not self.api_token_id:
            return "Not configured"
        if len(self.api_token_id) > 8:
            return f"{self.api_token_id[:4]}...{self.api_token_id[-4:]}"
        return "***"

    def validate(self) -> None:
        """Both fields are required to sign requests."""
        if not self.api_token_id:
            raise ClientConstructionError("api_token_id is not set", setting_name="api_token_id")
        if not self.api_secret:
            raise ClientConstructionError("api_secret is not set", setting_name="api_secret")


class NetworkConfig(Struct, frozen=True):
    """
    Network configuration settings.

    Attributes:
        request_timeout: Overall HTTP request timeout in seconds
    """
    request_timeout: float = 10.0

    def validate(self) -> None:
        """Validate network configuration."""
        if self.request_timeout <= 0:
            raise ClientConstructionError("request_timeout must be positive", setting_name="request_timeout")


class LiquidConfig(Struct, frozen=True):
    """
    Complete client configuration.

    Attributes:
        credentials: API token credentials used to sign every request
        base_url: REST API root, requests paths are appended to it verbatim
        network: Network configuration
    """
    credentials: LiquidCredentials
    base_url: str = DEFAULT_BASE_URL
    network: NetworkConfig = field(default_factory=NetworkConfig)

    def get_base_url(self) -> URL:
        """
        Parse the base URL.

        Raises:
            ClientConstructionError: If the URL is not an absolute http(s) URL
        """
        try:
            url = URL(self.base_url)
        except (TypeError, ValueError) as e:
            raise ClientConstructionError(f"Invalid base_url {self.base_url!r}: {e}", setting_name="base_url") from e

        if not url.is_absolute() or url.scheme not in ("http", "https") or not url.host:
            raise ClientConstructionError(f"Invalid base_url {self.base_url!r}", setting_name="base_url")
        return url

    def validate(self) -> None:
        """Validate credentials, network settings and base URL."""
        self.credentials.validate()
        self.network.validate()
        self.get_base_url()
