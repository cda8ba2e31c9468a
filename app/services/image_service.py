import base64
import logging

import requests

from app.errors import ImageFetchError
from app.schemas import ImagePart
from app.services.retry import retry_with_backoff

logger = logging.getLogger(__name__)

TRANSIENT_STATUS_CODES = {429, 500, 502, 503, 504}


class TransientFetchError(Exception):
    pass


class ImageFetcher:
    """Downloads an image and encodes it for the inference provider."""

    def __init__(self, http_get=None, timeout=30, default_mimetype='image/jpeg',
                 max_retries=1, backoff_base=1.0, backoff_max=8.0):
        # requests.get opens a new session per call; no cookies carry across fetches.
        self.http_get = http_get or requests.get
        self.timeout = timeout
        self.default_mimetype = default_mimetype
        self.max_retries = max_retries
        self.backoff_base = backoff_base
        self.backoff_max = backoff_max

    @classmethod
    def from_config(cls, config, http_get=None):
        return cls(
            http_get=http_get,
            timeout=config.get('IMAGE_FETCH_TIMEOUT', 30),
            default_mimetype=config.get('DEFAULT_IMAGE_MIMETYPE', 'image/jpeg'),
            max_retries=config.get('MAX_RETRIES', 1),
            backoff_base=config.get('RETRY_BACKOFF_BASE', 1.0),
            backoff_max=config.get('RETRY_BACKOFF_MAX', 8.0),
        )

    def _get(self, url):
        try:
            response = self.http_get(url, timeout=self.timeout)
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            raise TransientFetchError(str(e)) from e

        if response.status_code in TRANSIENT_STATUS_CODES:
            raise TransientFetchError(f"{response.status_code} {response.reason}")
        return response

    def fetch(self, url) -> ImagePart:
        try:
            response = retry_with_backoff(
                lambda: self._get(url),
                attempts=self.max_retries,
                backoff_base=self.backoff_base,
                backoff_max=self.backoff_max,
                is_retryable=lambda exc: isinstance(exc, TransientFetchError),
            )
        except (TransientFetchError, requests.exceptions.RequestException) as e:
            logger.error(f"Failed to download image from {url}: {e}")
            raise ImageFetchError(f"Failed to fetch image: {e}", cause=e) from e

        if not response.ok:
            logger.error(f"Image host returned {response.status_code} for {url}")
            raise ImageFetchError(f"Failed to fetch image: {response.reason}")

        content_type = response.headers.get('Content-Type', '')
        mimetype = content_type.split(';')[0].strip().lower() or self.default_mimetype

        data = base64.standard_b64encode(response.content).decode('utf-8')
        logger.info(f"Downloaded image ({len(response.content)} bytes) with mimetype: {mimetype}")
        return ImagePart(data=data, mimeType=mimetype)
