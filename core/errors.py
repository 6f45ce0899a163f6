from __future__ import annotations


class MonitorError(Exception):
    """Base class for every failure the monitor reports."""


class FetchFailure(MonitorError):
    """The status snapshot could not be obtained; the run must abort."""


class TransportFailure(FetchFailure):
    """Provider unreachable, timed out, or answered with an unusable body."""


class EmptyResponse(FetchFailure):
    """Provider answered, but without any outage data to judge by."""


class GatewayError(MonitorError):
    """A messaging gateway call failed."""


class GatewaySendFailure(GatewayError):
    pass


class GatewayEditFailure(GatewayError):
    pass


class GatewayDeleteFailure(GatewayError):
    pass


class ConfigurationError(MonitorError):
    """Settings are incomplete for the selected messaging channel."""
