"""Client for the Govee OpenAPI device discovery and state endpoints."""

from .api import (
    GoveeAuthError,
    GoveeClient,
    GoveeConfigurationError,
    GoveeDecodeError,
    GoveeError,
    GoveeHTTPError,
    GoveeRateLimitError,
    GoveeValidationError,
)
from .config import api_key_from_env, client_from_env
from .const import VERSION, CapabilityType, DataType, DeviceType
from .models import (
    ApiResponseStatus,
    Capability,
    Device,
    DeviceIdentifier,
    DeviceStateRequest,
    DeviceStateResponse,
    DiscoveryResponse,
    Field,
    FrozenObject,
    Option,
    Parameter,
    Range,
    State,
    StateValue,
    thaw_state_value,
)

__version__ = VERSION

__all__ = [
    "ApiResponseStatus",
    "Capability",
    "CapabilityType",
    "DataType",
    "Device",
    "DeviceIdentifier",
    "DeviceStateRequest",
    "DeviceStateResponse",
    "DeviceType",
    "DiscoveryResponse",
    "Field",
    "FrozenObject",
    "GoveeAuthError",
    "GoveeClient",
    "GoveeConfigurationError",
    "GoveeDecodeError",
    "GoveeError",
    "GoveeHTTPError",
    "GoveeRateLimitError",
    "GoveeValidationError",
    "Option",
    "Parameter",
    "Range",
    "State",
    "StateValue",
    "__version__",
    "api_key_from_env",
    "client_from_env",
    "thaw_state_value",
]
