import platform

from quoinex.config.structs import DEFAULT_BASE_URL
from quoinex.version import __version__

LIQUID_BASE_URL = DEFAULT_BASE_URL

API_VERSION_HEADER = "X-Quoine-API-Version"
API_VERSION = "2"
AUTH_HEADER = "X-Quoine-Auth"

JWT_ALGORITHM = "HS256"

USER_AGENT = f"QuoinexPythonClient/{__version__} (python{platform.python_version()})"
