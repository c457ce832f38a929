import httpx
import pytest

from cfptime import AsyncTransport, CfpTime, ClientConfig, SyncTransport

BASE_URL = "http://cfptime.test"


def conf_row(id=5, name="FooConf", **extra):
    row = {"id": id, "name": name, "country": "US", "website": "https://foo.example"}
    row.update(extra)
    return row


class Server:
    """Routes path -> (status, body) and records the requests it served."""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, path, body, status=200):
        self.routes[path] = (status, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.routes.get(request.url.path, (404, {"detail": "Not found."}))
        if isinstance(body, (bytes, str)):
            return httpx.Response(status, content=body)
        return httpx.Response(status, json=body)


@pytest.fixture
def server():
    return Server()


@pytest.fixture
def api(server):
    cfg = ClientConfig(base_url=BASE_URL)
    client = httpx.Client(transport=httpx.MockTransport(server.handler))
    with CfpTime(transport=SyncTransport(cfg, client=client)) as api:
        yield api
    client.close()


@pytest.fixture
def make_async_api(server):
    def _make():
        cfg = ClientConfig(base_url=BASE_URL)
        client = httpx.AsyncClient(transport=httpx.MockTransport(server.handler))
        return CfpTime(transport=AsyncTransport(cfg, client=client)), client

    return _make
