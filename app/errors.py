IMAGE_FETCH = "image_fetch"
INFERENCE = "inference"
UNKNOWN = "unknown"

ERROR_RESPONSES = {
    IMAGE_FETCH: (400, "Unable to access the provided image URL."),
    INFERENCE: (503, "AI service temporarily unavailable."),
    UNKNOWN: (500, "Failed to verify image with AI. Please try again."),
}


class VerificationError(Exception):
    kind = UNKNOWN

    def __init__(self, message, cause=None):
        super().__init__(message)
        self.cause = cause


class ImageFetchError(VerificationError):
    kind = IMAGE_FETCH


class InferenceError(VerificationError):
    kind = INFERENCE


def classify_error(exc):
    """Return the error kind for ``exc``.

    Typed errors carry their own kind. Anything else comes from a client
    that exposes no structured error, so its message text is inspected.
    """
    if isinstance(exc, VerificationError):
        return exc.kind

    message = str(exc)
    if "fetch" in message:
        return IMAGE_FETCH
    if "API" in message:
        return INFERENCE
    return UNKNOWN


def error_response_for(exc):
    return ERROR_RESPONSES[classify_error(exc)]
