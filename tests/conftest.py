import pytest
import responses

from build_client import BuildClient, Endpoints

API_URL = "https://build.electricimp.com/v4"
BASE_URL = "https://build.electricimp.com"
API_KEY = "test-api-key"


@pytest.fixture
def endpoints():
    return Endpoints(api_url=f"{API_URL}/", base_url=f"{BASE_URL}/")


@pytest.fixture
def client(endpoints):
    with BuildClient(API_KEY, endpoints=endpoints, timeout=5.0) as build_client:
        yield build_client


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps
