from typing import Any, List, Optional

import requests


class ApiError(Exception):
    """Any failed call to the backend; ``status_code`` is None for transport errors."""

    def __init__(self, message: str, status_code: Optional[int] = None, payload: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload

    @property
    def server_message(self) -> Optional[str]:
        if isinstance(self.payload, dict) and self.payload.get("message"):
            return str(self.payload["message"])
        return None

    @property
    def field_messages(self) -> List[str]:
        if not isinstance(self.payload, dict):
            return []
        errors = self.payload.get("errors")
        if isinstance(errors, dict):
            values = list(errors.values())
        elif isinstance(errors, (list, tuple)):
            values = list(errors)
        else:
            return []

        messages = []
        for value in values:
            if isinstance(value, (list, tuple)):
                messages.extend(str(v) for v in value)
            elif value is not None:
                messages.append(str(value))
        return messages


class UnauthorizedError(ApiError):
    pass


class ServerError(ApiError):
    pass


class ValidationError(ApiError):
    pass


def _decode_payload(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def error_from_response(response: requests.Response) -> ApiError:
    payload = _decode_payload(response)
    status = response.status_code
    message = f"{response.request.method if response.request else 'HTTP'} {response.url} -> {status}"

    if status == 401:
        return UnauthorizedError(message, status, payload)
    if status == 500:
        return ServerError(message, status, payload)
    if isinstance(payload, dict) and isinstance(payload.get("errors"), (dict, list)):
        return ValidationError(message, status, payload)
    return ApiError(message, status, payload)
