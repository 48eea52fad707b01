# backend/errors.py
"""
Fehlerarten der API. Jede Fehlerart traegt den HTTP-Status, mit dem sie
an den Aufrufer geht; main.py rendert sie als {"error": message}.
"""


class VodRelayError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(VodRelayError):
    status_code = 400


class UpstreamError(VodRelayError):
    """Upstream hat mit einem Nicht-2xx-Status geantwortet; der Status wird durchgereicht."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message, status_code)


class NotFoundError(VodRelayError):
    status_code = 404
