"""Exceptions raised by the Netatmo client and measurement decoder."""


class NetatmoError(Exception):
    """Base class for Netatmo client errors."""


class NetatmoAuthError(NetatmoError):
    """OAuth token acquisition failed."""


class MeasureDecodeError(NetatmoError, ValueError):
    """A getmeasure payload could not be decoded.

    Distinct from an empty result: a well-formed response without rows
    decodes to an empty MeasureSet, never to this error.
    """
