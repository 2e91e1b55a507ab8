import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from easybizness_mail.core.config import Settings
from easybizness_mail.core.limiter import limiter
from easybizness_mail.main import create_app


class FakeTransport:
    """Mail transport stub: records messages, or raises ``error`` on send."""

    def __init__(self, error: Exception | None = None):
        self.error = error
        self.sent = []

    async def send(self, message) -> None:
        if self.error is not None:
            raise self.error
        self.sent.append(message)


def make_settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


@pytest.fixture(autouse=True)
def reset_rate_limit():
    limiter.reset()
    yield
    limiter.enabled = False
    limiter.reset()


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def app(fake_transport):
    return create_app(settings=make_settings(), transport=fake_transport)


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://shop.example.com") as ac:
        yield ac
