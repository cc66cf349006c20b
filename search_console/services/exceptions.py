"""Domain-specific exceptions."""


class ServiceError(Exception):
    pass


class BackendError(ServiceError):
    """Base class for failures talking to the search backend."""


class NetworkError(BackendError):
    """The request could not be sent or did not complete in time."""


class HttpStatusError(BackendError):
    def __init__(self, status_code: int, message: str = "") -> None:
        self.status_code = status_code
        super().__init__(message or f"Backend responded with HTTP {status_code}")


class MalformedResponseError(BackendError):
    """The response body is missing the expected results collection."""


class InvalidSettingError(ServiceError):
    pass
