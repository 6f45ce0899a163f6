from core.composer import compose
from core.errors import (
    ConfigurationError,
    EmptyResponse,
    FetchFailure,
    GatewayDeleteFailure,
    GatewayEditFailure,
    GatewayError,
    GatewaySendFailure,
    MonitorError,
    TransportFailure,
)
from core.reconciler import decide
from core.state_store import JsonFileStateStore, MemoryStateStore, StateStore

__all__ = [
    "compose",
    "decide",
    "ConfigurationError",
    "EmptyResponse",
    "FetchFailure",
    "GatewayDeleteFailure",
    "GatewayEditFailure",
    "GatewayError",
    "GatewaySendFailure",
    "MonitorError",
    "TransportFailure",
    "JsonFileStateStore",
    "MemoryStateStore",
    "StateStore",
]
