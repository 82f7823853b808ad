"""Data models for the Govee OpenAPI client.

Every entity is an immutable dataclass mirroring one object of the vendor
JSON schema. ``from_dict`` builds an entity from parsed JSON and ``to_dict``
returns the wire representation. Converters raise ``TypeError`` or
``ValueError`` on JSON of the wrong shape; the API layer turns those into
``GoveeDecodeError``.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeAlias

StateValue: TypeAlias = (
    bool
    | int
    | float
    | str
    | tuple["StateValue", ...]
    | Mapping[str, "StateValue"]
    | None
)


def _as_object(data: Any, name: str) -> dict[str, Any]:
    """Return ``data`` as a JSON object, treating ``None`` as empty."""
    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"{name} must be a JSON object, got {type(data).__name__}"
        raise TypeError(msg)
    return data


def _as_array(data: Any, name: str) -> list[Any]:
    """Return ``data`` as a JSON array, treating ``None`` as empty."""
    if data is None:
        return []
    if not isinstance(data, list):
        msg = f"{name} must be a JSON array, got {type(data).__name__}"
        raise TypeError(msg)
    return data


def _get_str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        msg = f"'{key}' must be a string, got {type(value).__name__}"
        raise TypeError(msg)
    return value


def _get_int(data: dict[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int | float):
        msg = f"'{key}' must be an integer, got {type(value).__name__}"
        raise TypeError(msg)
    if isinstance(value, float):
        if not value.is_integer():
            msg = f"'{key}' must be an integer, got {value}"
            raise ValueError(msg)
        return int(value)
    return value


def _get_bool(data: dict[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        msg = f"'{key}' must be a boolean, got {type(value).__name__}"
        raise TypeError(msg)
    return value


class FrozenObject(Mapping[str, "StateValue"]):
    """Read-only, hashable JSON object held in a capability state.

    Compares equal to any mapping with the same items.
    """

    __slots__ = ("_data", "_hash")

    def __init__(self, data: Mapping[str, StateValue] | None = None) -> None:
        """Initialize from an already frozen mapping."""
        self._data: dict[str, StateValue] = dict(data or {})
        self._hash: int | None = None

    def __getitem__(self, key: str) -> StateValue:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self._data.items()))
        return self._hash

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"


def freeze_state_value(value: Any) -> StateValue:
    """Convert a decoded JSON value into its immutable form.

    Arrays become tuples and objects become ``FrozenObject``, recursively, so
    the result shares nothing with the parsed document and can be hashed.

    Raises:
        TypeError: If the value contains something JSON cannot represent.

    """
    if value is None or isinstance(value, bool | int | float | str):
        return value
    if isinstance(value, list | tuple):
        return tuple(freeze_state_value(item) for item in value)
    if isinstance(value, Mapping):
        result: dict[str, StateValue] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                msg = f"State object keys must be strings, got {type(key).__name__}"
                raise TypeError(msg)
            result[key] = freeze_state_value(item)
        return FrozenObject(result)
    msg = f"Unsupported state value type: {type(value).__name__}"
    raise TypeError(msg)


def thaw_state_value(value: StateValue) -> Any:
    """Return a state value as plain JSON data, with lists and dicts."""
    if isinstance(value, tuple | list):
        return [thaw_state_value(item) for item in value]
    if isinstance(value, Mapping):
        return {key: thaw_state_value(item) for key, item in value.items()}
    return value


@dataclass(frozen=True)
class Option:
    """A named discrete value of an ENUM parameter."""

    name: str = ""
    value: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> Option:
        """Build an ``Option`` from parsed JSON."""
        data = _as_object(data, "option")
        return cls(name=_get_str(data, "name"), value=_get_int(data, "value"))

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation."""
        result: dict[str, Any] = {}
        if self.name:
            result["name"] = self.name
        result["value"] = self.value
        return result


@dataclass(frozen=True)
class Range:
    """Numeric value range of an INTEGER parameter."""

    min: int = 0
    max: int = 0
    precision: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> Range:
        """Build a ``Range`` from parsed JSON."""
        data = _as_object(data, "range")
        return cls(
            min=_get_int(data, "min"),
            max=_get_int(data, "max"),
            precision=_get_int(data, "precision"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation."""
        return {"min": self.min, "max": self.max, "precision": self.precision}


def _options_from(data: dict[str, Any]) -> tuple[Option, ...]:
    return tuple(Option.from_dict(o) for o in _as_array(data.get("options"), "options"))


@dataclass(frozen=True)
class Field:
    """Named member of a STRUCT parameter."""

    field_name: str = ""
    data_type: str = ""
    options: tuple[Option, ...] = ()
    range: Range = field(default_factory=Range)
    required: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> Field:
        """Build a ``Field`` from parsed JSON."""
        data = _as_object(data, "field")
        return cls(
            field_name=_get_str(data, "fieldName"),
            data_type=_get_str(data, "dataType"),
            options=_options_from(data),
            range=Range.from_dict(data.get("range")),
            required=_get_bool(data, "required"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation."""
        result: dict[str, Any] = {
            "fieldName": self.field_name,
            "dataType": self.data_type,
        }
        if self.options:
            result["options"] = [option.to_dict() for option in self.options]
        result["range"] = self.range.to_dict()
        if self.required:
            result["required"] = True
        return result


@dataclass(frozen=True)
class Parameter:
    """Legal value space of a capability."""

    unit: str = ""
    data_type: str = ""
    options: tuple[Option, ...] = ()
    range: Range = field(default_factory=Range)
    fields: tuple[Field, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> Parameter:
        """Build a ``Parameter`` from parsed JSON."""
        data = _as_object(data, "parameters")
        return cls(
            unit=_get_str(data, "unit"),
            data_type=_get_str(data, "dataType"),
            options=_options_from(data),
            range=Range.from_dict(data.get("range")),
            fields=tuple(
                Field.from_dict(f) for f in _as_array(data.get("fields"), "fields")
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation."""
        result: dict[str, Any] = {"unit": self.unit, "dataType": self.data_type}
        if self.options:
            result["options"] = [option.to_dict() for option in self.options]
        result["range"] = self.range.to_dict()
        if self.fields:
            result["fields"] = [f.to_dict() for f in self.fields]
        return result


@dataclass(frozen=True)
class State:
    """Current value of a capability.

    The shape of ``value`` follows the data type of the capability
    parameters: a boolean or integer for simple types, a string for enum
    labels, an object for STRUCT capabilities. Arrays are stored as tuples
    and objects as ``FrozenObject``; ``thaw_state_value`` gives plain data.
    """

    value: StateValue = None

    def __post_init__(self) -> None:
        """Freeze the value so the state cannot change after creation."""
        object.__setattr__(self, "value", freeze_state_value(self.value))

    @classmethod
    def from_dict(cls, data: Any) -> State:
        """Build a ``State`` from parsed JSON."""
        data = _as_object(data, "state")
        return cls(value=data.get("value"))

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation."""
        if self.value is None:
            return {}
        return {"value": thaw_state_value(self.value)}


@dataclass(frozen=True)
class Capability:
    """A controllable or observable feature of a device."""

    type: str
    instance: str
    parameters: Parameter = field(default_factory=Parameter)
    state: State = field(default_factory=State)

    @classmethod
    def from_dict(cls, data: Any) -> Capability:
        """Build a ``Capability`` from parsed JSON."""
        data = _as_object(data, "capability")
        return cls(
            type=_get_str(data, "type"),
            instance=_get_str(data, "instance"),
            parameters=Parameter.from_dict(data.get("parameters")),
            state=State.from_dict(data.get("state")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation."""
        return {
            "type": self.type,
            "instance": self.instance,
            "parameters": self.parameters.to_dict(),
            "state": self.state.to_dict(),
        }


@dataclass(frozen=True)
class Device:
    """A Govee device as reported by discovery or a state query.

    Attributes:
        sku: Model identifier, e.g. ``H6160``.
        device: Per-unit device identifier.
        device_name: Name given to the device in the Govee app.
        type: Device type tag, see ``DeviceType``.
        capabilities: Capabilities in the order the API returned them.

    """

    sku: str
    device: str
    device_name: str = ""
    type: str = ""
    capabilities: tuple[Capability, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> Device:
        """Build a ``Device`` from parsed JSON."""
        data = _as_object(data, "device")
        return cls(
            sku=_get_str(data, "sku"),
            device=_get_str(data, "device"),
            device_name=_get_str(data, "deviceName"),
            type=_get_str(data, "type"),
            capabilities=tuple(
                Capability.from_dict(c)
                for c in _as_array(data.get("capabilities"), "capabilities")
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation."""
        return {
            "sku": self.sku,
            "device": self.device,
            "deviceName": self.device_name,
            "type": self.type,
            "capabilities": [c.to_dict() for c in self.capabilities],
        }

    def find_capability(self, type_: str, instance: str) -> Capability | None:
        """Return the capability identified by ``(type_, instance)``, if any."""
        for capability in self.capabilities:
            if capability.type == type_ and capability.instance == instance:
                return capability
        return None


@dataclass(frozen=True)
class ApiResponseStatus:
    """Status block carried by every API response."""

    request_id: str = ""
    code: int = 0
    message: str = ""

    @staticmethod
    def _status_kwargs(data: dict[str, Any]) -> dict[str, Any]:
        """Read the status fields from a response object."""
        return {
            "request_id": _get_str(data, "requestId"),
            "code": _get_int(data, "code"),
            "message": _get_str(data, "msg"),
        }

    def _status_dict(self) -> dict[str, Any]:
        """Return the status fields under their wire names."""
        result: dict[str, Any] = {}
        if self.request_id:
            result["requestId"] = self.request_id
        result["code"] = self.code
        result["msg"] = self.message
        return result


@dataclass(frozen=True)
class DiscoveryResponse(ApiResponseStatus):
    """Response of the device listing endpoint."""

    data: tuple[Device, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> DiscoveryResponse:
        """Build a ``DiscoveryResponse`` from parsed JSON."""
        data = _as_object(data, "response")
        return cls(
            **cls._status_kwargs(data),
            data=tuple(Device.from_dict(d) for d in _as_array(data.get("data"), "data")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation."""
        result = self._status_dict()
        result["data"] = [device.to_dict() for device in self.data]
        return result


@dataclass(frozen=True)
class DeviceStateResponse(ApiResponseStatus):
    """Response of the device state endpoint.

    ``payload`` is ``None`` when the server answered with a null payload.
    """

    payload: Device | None = None

    @classmethod
    def from_dict(cls, data: Any) -> DeviceStateResponse:
        """Build a ``DeviceStateResponse`` from parsed JSON."""
        data = _as_object(data, "response")
        payload = data.get("payload")
        return cls(
            **cls._status_kwargs(data),
            payload=None if payload is None else Device.from_dict(payload),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation."""
        result = self._status_dict()
        result["payload"] = None if self.payload is None else self.payload.to_dict()
        return result


@dataclass(frozen=True)
class DeviceIdentifier:
    """The ``(sku, device)`` pair addressing one device."""

    sku: str
    device: str

    @classmethod
    def from_dict(cls, data: Any) -> DeviceIdentifier:
        """Build a ``DeviceIdentifier`` from parsed JSON."""
        data = _as_object(data, "payload")
        return cls(sku=_get_str(data, "sku"), device=_get_str(data, "device"))

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation."""
        return {"sku": self.sku, "device": self.device}


@dataclass(frozen=True)
class DeviceStateRequest:
    """Body of a device state query."""

    request_id: str
    payload: DeviceIdentifier

    @classmethod
    def from_dict(cls, data: Any) -> DeviceStateRequest:
        """Build a ``DeviceStateRequest`` from parsed JSON."""
        data = _as_object(data, "request")
        return cls(
            request_id=_get_str(data, "requestId"),
            payload=DeviceIdentifier.from_dict(data.get("payload")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation."""
        return {"requestId": self.request_id, "payload": self.payload.to_dict()}
