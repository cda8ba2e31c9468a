import logging

import requests

from app.errors import InferenceError
from app.services.retry import retry_with_backoff

logger = logging.getLogger(__name__)

TRANSIENT_STATUS_CODES = {429, 500, 502, 503, 504}


def build_verification_prompt(product_name):
    return f"""
Analyze this image carefully and determine if it shows "{product_name}".
Look at the actual visual content of the image, not any text overlays or labels.

Consider:
- Does the image contain the specific product mentioned?
- Is the product clearly visible and identifiable?
- Ignore any text, watermarks, or labels in the image

Product to identify: "{product_name}"

Respond with only "yes" if the image clearly shows this product, or "no" if it doesn't.
"""


class TransientGeminiError(Exception):
    pass


class GeminiClient:
    """Thin client for the Gemini ``generateContent`` REST endpoint."""

    def __init__(self, api_key, model='gemini-1.5-flash',
                 api_base='https://generativelanguage.googleapis.com/v1beta',
                 timeout=60, max_retries=1, backoff_base=1.0, backoff_max=8.0, session=None):
        self.api_key = api_key
        self.model = model
        self.api_base = api_base.rstrip('/')
        self.timeout = timeout
        self.max_retries = max_retries
        self.backoff_base = backoff_base
        self.backoff_max = backoff_max
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config, session=None):
        return cls(
            api_key=config.get('GEMINI_API_KEY'),
            model=config.get('GEMINI_MODEL', 'gemini-1.5-flash'),
            api_base=config.get('GEMINI_API_BASE', 'https://generativelanguage.googleapis.com/v1beta'),
            timeout=config.get('GEMINI_TIMEOUT', 60),
            max_retries=config.get('MAX_RETRIES', 1),
            backoff_base=config.get('RETRY_BACKOFF_BASE', 1.0),
            backoff_max=config.get('RETRY_BACKOFF_MAX', 8.0),
            session=session,
        )

    @property
    def endpoint(self):
        return f"{self.api_base}/models/{self.model}:generateContent"

    def _post(self, payload):
        try:
            response = self.session.post(
                self.endpoint,
                params={'key': self.api_key},
                headers={'Content-Type': 'application/json'},
                json=payload,
                timeout=self.timeout,
            )
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            raise TransientGeminiError(str(e)) from e

        if response.status_code in TRANSIENT_STATUS_CODES:
            raise TransientGeminiError(f"HTTP {response.status_code}: {response.text}")
        return response

    def generate_content(self, prompt, image_part):
        if not self.api_key:
            raise InferenceError("GEMINI_API_KEY environment variable not set.")

        payload = {
            "contents": [{"parts": [{"text": prompt}, image_part.to_inline_data()]}],
        }

        try:
            response = retry_with_backoff(
                lambda: self._post(payload),
                attempts=self.max_retries,
                backoff_base=self.backoff_base,
                backoff_max=self.backoff_max,
                is_retryable=lambda exc: isinstance(exc, TransientGeminiError),
            )
        except TransientGeminiError as e:
            raise InferenceError(f"Gemini API unavailable: {e}", cause=e) from e
        except requests.exceptions.RequestException as e:
            raise InferenceError(f"Gemini API request failed: {e}", cause=e) from e

        if not response.ok:
            logger.error(f"Gemini API error {response.status_code}. Response: {response.text}")
            raise InferenceError(f"Gemini API error {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise InferenceError("Gemini API returned a non-JSON response.", cause=e) from e

        candidates = data.get("candidates") or []
        if not candidates or not candidates[0].get("content"):
            raise InferenceError(f"Gemini API response content missing or blocked. Data: {data}")

        parts = candidates[0]["content"].get("parts") or []
        text = "".join(part.get("text", "") for part in parts)
        if not text:
            raise InferenceError("Gemini API response contained no text.")
        return text
