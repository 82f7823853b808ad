"""Constants for the Govee OpenAPI client.

This module contains the API endpoints, header names, configuration keys and
the enumerations the vendor uses for device, capability and data types.
"""

import platform
from enum import StrEnum

VERSION = "1.0.0"

BASE_URL = "https://openapi.api.govee.com/router/api/v1"

ENDPOINT_DEVICES = "user/devices"
ENDPOINT_DEVICE_STATE = "device/state"
# Not exposed by the client yet
ENDPOINT_DEVICE_CONTROL = "device/control"
ENDPOINT_DEVICE_SCENES = "device/scenes"

HEADER_API_KEY = "Govee-API-Key"
CONTENT_TYPE_JSON = "application/json"
USER_AGENT = (
    f"govee-openapi/{VERSION} ({platform.system().lower()}; {platform.machine()})"
)

ENV_API_KEY = "GOVEE_API_KEY"

DEFAULT_TIMEOUT = 10.0  # Seconds
REQUEST_LIMIT = 10000  # Requests per account per day

HTTP_UNAUTHORIZED = 401
HTTP_TOO_MANY_REQUESTS = 429


class DeviceType(StrEnum):
    """Device type tags reported in the ``type`` field of a device."""

    LIGHT = "devices.types.light"
    AIR_PURIFIER = "devices.types.air_purifier"
    THERMOMETER = "devices.types.thermometer"
    SOCKET = "devices.types.socket"
    SENSOR = "devices.types.sensor"
    HEATER = "devices.types.heater"
    HUMIDIFIER = "devices.types.humidifier"
    DEHUMIDIFIER = "devices.types.dehumidifier"
    ICE_MAKER = "devices.types.ice_maker"
    DIFFUSER = "devices.types.aroma_diffuser"
    BOX = "devices.types.box"


class CapabilityType(StrEnum):
    """Capability type tags.

    The work mode and temperature setting types use the singular ``device.``
    prefix, as the vendor documents them.
    """

    ON_OFF = "devices.capabilities.on_off"  # powerSwitch
    TOGGLE = "devices.capabilities.toggle"  # oscillationToggle, nightlightToggle
    RANGE = "devices.capabilities.range"  # brightness, humidity, volume
    MODE = "devices.capabilities.mode"  # nightlightScene, gearMode, fanSpeed
    COLOR_SETTING = "devices.capabilities.color_setting"  # colorRgb, colorTemperatureK
    SEGMENT_COLOR_SETTING = "devices.capabilities.segment_color_setting"
    MUSIC_SETTING = "devices.capabilities.music_setting"
    DYNAMIC_SCENE = "devices.capabilities.dynamic_scene"  # lightScene, diyScene
    WORK_MODE = "device.capabilities.work_mode"
    TEMPERATURE_SETTING = "device.capabilities.temperature_setting"


class DataType(StrEnum):
    """Data type of a capability parameter or struct field."""

    ENUM = "ENUM"
    INTEGER = "INTEGER"
    STRUCT = "STRUCT"
    ARRAY = "Array"
