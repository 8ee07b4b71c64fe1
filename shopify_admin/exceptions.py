"""
Shopify-specific exception handling and error classes.
"""

from typing import Dict, Any, List, Optional


class ShopifyError(Exception):
    """Custom exception for Shopify API errors."""

    def __init__(self,
                 message: str,
                 status_code: Optional[int] = None,
                 response: Optional[Dict[str, Any]] = None,
                 errors: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response
        self.errors = errors or []


class ShopifyRateLimitError(ShopifyError):
    """Error raised when Shopify API rate limit is exceeded."""

    def __init__(self, message: str, retry_after: Optional[float] = None, **kwargs):
        super().__init__(message, 429, **kwargs)
        self.retry_after = retry_after


class ShopifyAuthenticationError(ShopifyError):
    """Error raised when Shopify authentication fails."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, 401, **kwargs)


class ShopifyPermissionError(ShopifyError):
    """Error raised when Shopify permission is denied."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, 403, **kwargs)


class ShopifyNotFoundError(ShopifyError):
    """Error raised when Shopify resource is not found."""

    def __init__(self, message: str, resource_type: Optional[str] = None, **kwargs):
        super().__init__(message, 404, **kwargs)
        self.resource_type = resource_type


class ShopifyValidationError(ShopifyError):
    """Error raised when Shopify request validation fails."""

    def __init__(self, message: str, validation_errors: Optional[Dict[str, Any]] = None, **kwargs):
        super().__init__(message, 422, **kwargs)
        self.validation_errors = validation_errors or {}


class ShopifyServerError(ShopifyError):
    """Error raised when Shopify server error occurs."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, 500, **kwargs)


class ShopifyTimeoutError(ShopifyError):
    """Error raised when Shopify request times out."""

    def __init__(self, message: str, timeout: Optional[float] = None, **kwargs):
        super().__init__(message, 408, **kwargs)
        self.timeout = timeout


class ShopifyConnectionError(ShopifyError):
    """Error raised when Shopify connection fails."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, 503, **kwargs)


class ShopifyResponseDecodingError(ShopifyError):
    """Error raised when a successful response body cannot be decoded."""

    def __init__(self, message: str, body: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.body = body


class ShopifyPaginationError(ShopifyResponseDecodingError):
    """Error raised when the Link header of a response cannot be parsed."""


class ShopifyInvalidOptionsError(ShopifyError):
    """Error raised when query options cannot be encoded."""


def _collect_error_messages(errors: Any) -> List[str]:
    """Flatten the `errors` member of a Shopify error body into messages."""
    if errors is None:
        return []
    if isinstance(errors, str):
        return [errors]
    if isinstance(errors, list):
        return [str(error) for error in errors]
    if isinstance(errors, dict):
        messages = []
        for field, field_errors in errors.items():
            if isinstance(field_errors, list):
                messages.append(f"{field}: {', '.join(str(e) for e in field_errors)}")
            else:
                messages.append(f"{field}: {field_errors}")
        return messages
    return [str(errors)]


def shopify_error_from_response(status_code: int,
                                response_data: Dict[str, Any],
                                reason: str = "",
                                retry_after: Optional[float] = None) -> ShopifyError:
    """
    Create appropriate ShopifyError from HTTP response.

    Args:
        status_code: HTTP status code
        response_data: Decoded response body (empty when the body was not JSON)
        reason: HTTP reason phrase, used when the body carries no message
        retry_after: Value of the Retry-After header, if any

    Returns:
        Appropriate ShopifyError subclass
    """
    errors = _collect_error_messages(response_data.get("errors"))

    if errors:
        error_message = "; ".join(errors)
    elif "error" in response_data:
        error_message = str(response_data["error"])
        if response_data.get("error_description"):
            error_message = f"{error_message}: {response_data['error_description']}"
        errors = [error_message]
    elif "message" in response_data:
        error_message = str(response_data["message"])
        errors = [error_message]
    else:
        error_message = reason or f"HTTP {status_code}"

    kwargs = {"response": response_data, "errors": errors}

    # Create appropriate error based on status code
    if status_code == 401:
        return ShopifyAuthenticationError(error_message, **kwargs)
    elif status_code == 403:
        return ShopifyPermissionError(error_message, **kwargs)
    elif status_code == 404:
        return ShopifyNotFoundError(error_message, **kwargs)
    elif status_code == 422:
        validation_errors = response_data.get("errors")
        if not isinstance(validation_errors, dict):
            validation_errors = {}
        return ShopifyValidationError(error_message, validation_errors, **kwargs)
    elif status_code == 429:
        return ShopifyRateLimitError(error_message, retry_after, **kwargs)
    elif status_code == 500:
        return ShopifyServerError(error_message, **kwargs)
    elif status_code == 503:
        return ShopifyConnectionError(error_message, **kwargs)
    else:
        return ShopifyError(error_message, status_code, **kwargs)
