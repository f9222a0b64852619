import asyncio
import logging

from rtctf.services.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)


async def start_rate_limit_sweeper(limiter: RateLimiter, interval_seconds: float):
    while True:
        try:
            await asyncio.sleep(interval_seconds)
            purged = limiter.purge_expired()
            logger.debug("Purged %d expired rate-limit records", purged)
        except asyncio.CancelledError:
            break
        except Exception:
            logger.exception("Error during rate-limit sweep")
