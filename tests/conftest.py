"""Pytest configuration and fixtures for Govee OpenAPI tests."""

import pytest

from govee_openapi.api import GoveeClient

TEST_API_KEY = "test-api-key"
TEST_SKU = "H6160"
TEST_DEVICE_ID = "AA:BB:CC:DD:EE:FF:11:22"


@pytest.fixture
def client():
    """Fixture providing a client that is closed after the test."""
    govee_client = GoveeClient(TEST_API_KEY)
    yield govee_client
    govee_client.close()


@pytest.fixture
def sample_devices_response() -> dict:
    """Fixture providing a devices API response with a single light.

    Returns:
        A dictionary representing a devices API response.

    """
    return {
        "requestId": "r1",
        "code": 200,
        "msg": "ok",
        "data": [
            {
                "sku": TEST_SKU,
                "device": "d1",
                "deviceName": "Light",
                "type": "devices.types.light",
                "capabilities": [],
            },
        ],
    }


@pytest.fixture
def sample_light_device() -> dict:
    """Fixture providing a light with power, brightness and segment capabilities.

    Returns:
        A dictionary representing a device as returned by discovery.

    """
    return {
        "sku": TEST_SKU,
        "device": TEST_DEVICE_ID,
        "deviceName": "Living Room Strip",
        "type": "devices.types.light",
        "capabilities": [
            {
                "type": "devices.capabilities.on_off",
                "instance": "powerSwitch",
                "parameters": {
                    "dataType": "ENUM",
                    "options": [
                        {"name": "on", "value": 1},
                        {"name": "off", "value": 0},
                    ],
                },
            },
            {
                "type": "devices.capabilities.range",
                "instance": "brightness",
                "parameters": {
                    "unit": "unit.percent",
                    "dataType": "INTEGER",
                    "range": {"min": 1, "max": 100, "precision": 1},
                },
            },
            {
                "type": "devices.capabilities.segment_color_setting",
                "instance": "segmentedColorRgb",
                "parameters": {
                    "dataType": "STRUCT",
                    "fields": [
                        {
                            "fieldName": "segment",
                            "dataType": "Array",
                            "range": {"min": 0, "max": 14},
                            "required": True,
                        },
                        {
                            "fieldName": "rgb",
                            "dataType": "INTEGER",
                            "range": {"min": 0, "max": 16777215},
                            "required": True,
                        },
                    ],
                },
            },
        ],
    }


@pytest.fixture
def sample_device_state_response() -> dict:
    """Fixture providing a device state API response.

    Returns:
        A dictionary representing a device state API response whose
        capabilities carry boolean, integer and object state values.

    """
    return {
        "requestId": "uuid",
        "code": 200,
        "msg": "success",
        "payload": {
            "sku": TEST_SKU,
            "device": TEST_DEVICE_ID,
            "capabilities": [
                {
                    "type": "devices.capabilities.online",
                    "instance": "online",
                    "state": {"value": True},
                },
                {
                    "type": "devices.capabilities.on_off",
                    "instance": "powerSwitch",
                    "state": {"value": 1},
                },
                {
                    "type": "devices.capabilities.range",
                    "instance": "brightness",
                    "state": {"value": 100},
                },
                {
                    "type": "devices.capabilities.music_setting",
                    "instance": "musicMode",
                    "state": {
                        "value": {
                            "musicMode": 3,
                            "sensitivity": 50,
                            "autoColor": 1,
                            "rgb": None,
                            "segment": [0, 1, 2],
                        },
                    },
                },
            ],
        },
    }


@pytest.fixture
def sample_null_state_response() -> dict:
    """Fixture providing a device state API response without payload."""
    return {"requestId": "uuid", "code": 200, "msg": "success", "payload": None}
