from __future__ import annotations


class RequestParameterError(ValueError):
    """A request could not be turned into resolver inputs."""


class MissingParameter(RequestParameterError):
    pass


class InvalidInput(RequestParameterError):
    pass


class RateResolutionError(LookupError):
    """The provider answered, but not with something a rate or day can be read from."""


class NoDataForPeriod(RateResolutionError):
    def __init__(self, message: str = "no data for currencies in that period") -> None:
        super().__init__(message)


class NoConversionRate(RateResolutionError):
    def __init__(self, message: str = "no conversion rate for that period") -> None:
        super().__init__(message)


__all__ = [
    "InvalidInput",
    "MissingParameter",
    "NoConversionRate",
    "NoDataForPeriod",
    "RateResolutionError",
    "RequestParameterError",
]
