from unittest.mock import MagicMock

import pytest

from phyphox_client.client import PhyphoxClient
from phyphox_client.phyphox import Phyphox
from tests.phyphox_sim import PhyphoxSim, SimTransport


@pytest.fixture
def transport():
    """Transport stub; set fetch_json.return_value / side_effect per test."""
    t = MagicMock()
    t.fetch_json.return_value = {"buffer": {}}
    return t


@pytest.fixture
def client(transport):
    return PhyphoxClient("192.168.0.1:8080", transport=transport)


@pytest.fixture
def sim():
    return PhyphoxSim()


@pytest.fixture
def phy(sim):
    return Phyphox("192.168.0.1:8080", transport=SimTransport(sim))
