"""Error taxonomy for image generation failures.

Every failure the image client can report is an :class:`ImageGenerationError`.
The message of each instance is user-facing and is displayed as-is by the UI.

Upstream failures are classified by matching the upstream error text against
known phrases (case-insensitive substring match). This is best-effort: the
Gemini SDK does not expose stable error codes for these conditions.
"""

CONFIGURATION_MESSAGE = (
    "Gemini API client is not initialized. The API key might be missing or not "
    "configured correctly in your environment."
)
AUTH_MESSAGE = (
    "API key is invalid or missing required permissions. "
    "Please check your Google AI Studio API key settings."
)
RATE_LIMIT_MESSAGE = "API request limit reached. Please try again later or check your quota."
EMPTY_RESPONSE_MESSAGE = (
    "No image data received from API. The response might be empty or malformed."
)
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred while generating the image."

AUTH_PATTERNS = ("api key not valid", "permission denied")
RATE_LIMIT_PATTERNS = ("quota", "rate limit")


class ImageGenerationError(Exception):
    """Base class for all image generation failures."""

    default_message = UNKNOWN_ERROR_MESSAGE

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class ConfigurationError(ImageGenerationError):
    """No usable credentials are configured."""

    default_message = CONFIGURATION_MESSAGE


class AuthError(ImageGenerationError):
    """The API rejected the credentials."""

    default_message = AUTH_MESSAGE


class RateLimitError(ImageGenerationError):
    """The API quota or rate limit was hit."""

    default_message = RATE_LIMIT_MESSAGE


class UpstreamError(ImageGenerationError):
    """Any other API or transport failure."""

    pass


class EmptyResponseError(ImageGenerationError):
    """The response was well-formed but contained no usable images."""

    default_message = EMPTY_RESPONSE_MESSAGE


def classify_api_error(error: BaseException) -> ImageGenerationError:
    """Translate an upstream exception into the error taxonomy.

    Errors that already belong to the taxonomy are returned unchanged.

    Args:
        error: Exception raised by the SDK or transport

    Returns:
        The matching ImageGenerationError instance
    """
    if isinstance(error, ImageGenerationError):
        return error

    message = str(error)
    if not message:
        return UpstreamError(UNKNOWN_ERROR_MESSAGE)

    lowered = message.lower()
    # TODO: switch to the SDK's structured status codes once they are stable for Imagen
    if any(pattern in lowered for pattern in AUTH_PATTERNS):
        return AuthError()
    if any(pattern in lowered for pattern in RATE_LIMIT_PATTERNS):
        return RateLimitError()
    return UpstreamError(f"Gemini API error: {message}")
