import logging
import re

from app.schemas import VerificationResult
from app.services.gemini_service import build_verification_prompt

logger = logging.getLogger(__name__)


def interpret_verdict(raw_text) -> VerificationResult:
    """Turn the model's free-text answer into a match decision.

    Any answer containing "yes" counts as a match. Answers with neither
    "yes" nor "no" are treated as no match.
    """
    text = raw_text.strip().lower()
    is_match = 'yes' in text
    if not is_match and not re.search(r"\bno\b", text):
        logger.warning(f"Indeterminate verdict, treating as no match: {text!r}")
    return VerificationResult(isMatch=is_match, aiResponse=text)


class ImageVerifier:
    def __init__(self, image_fetcher, gemini_client):
        self.image_fetcher = image_fetcher
        self.gemini_client = gemini_client

    def verify(self, verification_request) -> VerificationResult:
        product_name = verification_request.productName

        stage = 'fetch'
        try:
            image_part = self.image_fetcher.fetch(str(verification_request.imageUrl))
            stage = 'inference'
            raw_text = self.gemini_client.generate_content(build_verification_prompt(product_name), image_part)
        except Exception:
            logger.exception(f"AI verification failed for \"{product_name}\" during {stage}")
            raise

        result = interpret_verdict(raw_text)
        logger.info(f"AI verification for \"{product_name}\": {result.aiResponse}")
        return result
