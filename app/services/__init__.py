from .gemini_service import GeminiClient, build_verification_prompt
from .image_service import ImageFetcher
from .retry import retry_with_backoff
from .verification_service import ImageVerifier, interpret_verdict

__all__ = [
    "GeminiClient",
    "build_verification_prompt",
    "ImageFetcher",
    "retry_with_backoff",
    "ImageVerifier",
    "interpret_verdict",
]
