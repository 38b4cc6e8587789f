"""
Pytest configuration and shared fixtures for client tests.

Provides a local aiohttp server that records every request it receives and
replies with canned responses. Clients are pointed at it through the
base_url constructor argument.
"""

import asyncio
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple, Union

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from quoinex.exchanges.liquid import create_client
from quoinex.infrastructure.logging import ClientLogger, LoggerFactory, LogBackend, LogRecord


@dataclass
class RecordedRequest:
    method: str
    path: str
    raw_path: str
    query_string: str
    headers: Mapping[str, str]
    body: bytes


class LiquidTestServer:
    """Canned-response HTTP server. Unknown routes answer 404 with a fixed body."""

    NOT_FOUND_BODY = '{"message":"not found"}'

    def __init__(self):
        self.requests: List[RecordedRequest] = []
        self._routes: Dict[Tuple[str, str], Tuple[int, Union[str, bytes], float]] = {}
        self.base_url: Optional[str] = None

        self.app = web.Application()
        self.app.router.add_route("*", "/{tail:.*}", self._handle)

    def respond(self, method: str, path: str, body: Union[str, bytes], status: int = 200, delay: float = 0.0) -> None:
        self._routes[(method, path)] = (status, body, delay)

    @property
    def last_request(self) -> RecordedRequest:
        return self.requests[-1]

    async def _handle(self, request: web.Request) -> web.Response:
        self.requests.append(RecordedRequest(
            method=request.method,
            path=request.path,
            raw_path=request.raw_path,
            query_string=request.query_string,
            headers=request.headers.copy(),
            body=await request.read(),
        ))

        status, body, delay = self._routes.get(
            (request.method, request.path), (404, self.NOT_FOUND_BODY, 0.0)
        )
        if delay:
            await asyncio.sleep(delay)
        if isinstance(body, str):
            body = body.encode("utf-8")
        return web.Response(status=status, body=body, content_type="application/json")


class RecordingBackend(LogBackend):
    """Keeps every record in memory."""

    def __init__(self, name: str = "recording"):
        super().__init__(name)
        self.records: List[LogRecord] = []

    def write(self, record: LogRecord) -> None:
        self.records.append(record)

    def flush(self) -> None:
        pass

    def messages(self) -> List[str]:
        return [r.message for r in self.records]


@pytest.fixture(autouse=True)
def reset_logging():
    """Every test starts from the default (no-op) logging config."""
    LoggerFactory.clear_cache()
    yield
    LoggerFactory.clear_cache()


@pytest_asyncio.fixture
async def liquid_server():
    server = LiquidTestServer()
    test_server = TestServer(server.app)
    await test_server.start_server()
    server.base_url = f"http://{test_server.host}:{test_server.port}"
    yield server
    await test_server.close()


@pytest_asyncio.fixture
async def client(liquid_server):
    client = create_client("apiTokenID", "secret", base_url=liquid_server.base_url)
    yield client
    await client.close()


@pytest.fixture
def recording_backend():
    return RecordingBackend()


@pytest_asyncio.fixture
async def recorded_client(liquid_server, recording_backend):
    """Client whose logger keeps every record, dumps included."""
    logger = ClientLogger("test.liquid", [recording_backend])
    client = create_client("apiTokenID", "secret", logger=logger, base_url=liquid_server.base_url)
    yield client
    await client.close()
