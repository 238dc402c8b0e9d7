import json
from collections.abc import AsyncIterator
from typing import Any

import httpx
import pytest
import pytest_asyncio
from srfax.client import SRFaxClient
from srfax.core.config.app_config import ClientConfig

# Not the real endpoint, so an unmocked request can never reach SRFax
TEST_SRFAX_URL = "https://srfax.test/SRF_SecWebSvc.php"
TEST_ACCESS_ID = 925
TEST_ACCESS_PWD = "s3cret-pwd"


@pytest.fixture
def client_config() -> ClientConfig:
    return ClientConfig(
        access_id=TEST_ACCESS_ID, access_pwd=TEST_ACCESS_PWD, url=TEST_SRFAX_URL
    )


@pytest_asyncio.fixture(name="srfax_client")
async def srfax_client_fixture(
    client_config: ClientConfig,
) -> AsyncIterator[SRFaxClient]:
    async with httpx.AsyncClient() as client:
        yield SRFaxClient(client_config, client=client)


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    env = {
        "SRFAX_ACCESS_ID": "925",
        "SRFAX_ACCESS_PWD": "env-pwd",
        "SRFAX_URL": TEST_SRFAX_URL,
        "SRFAX_TIMEOUT": "12.5",
        "SRFAX_LOG_LEVEL": "debug",
    }
    for k, v in env.items():
        monkeypatch.setenv(k, v)
    return env


def success(result: Any) -> dict[str, Any]:
    return {"Status": "Success", "Result": result}


def failure(message: str) -> dict[str, Any]:
    return {"Status": "Failed", "Result": message}


def sent_payload(request: httpx.Request) -> dict[str, Any]:
    """Decode the JSON body a client posted to SRFax."""
    return json.loads(request.content)
