import logging
import time

logger = logging.getLogger(__name__)


def retry_with_backoff(func, attempts, backoff_base, backoff_max, is_retryable=lambda exc: True, sleep=time.sleep):
    """Call ``func`` up to ``attempts`` times with exponential backoff.

    Only exceptions accepted by ``is_retryable`` are retried. The last
    exception is re-raised once the attempts are used up.
    """
    attempts = max(1, attempts)
    for i in range(attempts):
        try:
            return func()
        except Exception as e:
            if i >= attempts - 1 or not is_retryable(e):
                raise
            wait_time = min(backoff_max, backoff_base * (2 ** i))
            logger.warning(f"Attempt {i + 1}/{attempts} failed ({type(e).__name__}: {e}). Retrying in {wait_time}s...")
            sleep(wait_time)
