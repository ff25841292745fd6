"""
Simulated provider replies.

After a user sends a message, a job is queued on the ARQ worker to append a
canned reply from the provider once the configured delay has passed. There
is no real provider messaging backend behind this.
"""

import logging
from datetime import timedelta
from typing import Optional

from arq import create_pool

from ...config import AUTO_REPLY_DELAY_SECONDS, AUTO_REPLY_ENABLED

logger = logging.getLogger(__name__)

AUTO_REPLY_TASK = "send_provider_auto_reply_task"


class AutoReplyScheduler:
    """Queues delayed provider auto-replies on the ARQ worker"""

    def __init__(self, enabled: bool = AUTO_REPLY_ENABLED, delay_seconds: int = AUTO_REPLY_DELAY_SECONDS):
        self.enabled = enabled
        self.delay_seconds = delay_seconds

    async def schedule(self, user_id: int, provider_id: int) -> Optional[str]:
        """
        Queue an auto-reply for the (user, provider) thread.

        Returns the job id, or None when disabled or when the queue is
        unreachable. Queue failures never reach the caller: the user's
        message has already been stored.
        """
        if not self.enabled:
            return None

        from ...worker import get_redis_settings

        try:
            pool = await create_pool(get_redis_settings())
            try:
                job = await pool.enqueue_job(
                    AUTO_REPLY_TASK,
                    user_id,
                    provider_id,
                    _defer_by=timedelta(seconds=self.delay_seconds),
                )
            finally:
                await pool.close()
        except Exception as e:
            logger.warning(f"⚠️ Failed to queue auto-reply for provider {provider_id}: {e}")
            return None

        if job is None:
            # ARQ returns None when a job with the same id is already queued
            return None

        logger.info(f"📋 Auto-reply job queued: {job.job_id} (in {self.delay_seconds}s)")
        return job.job_id


def get_auto_reply_scheduler() -> AutoReplyScheduler:
    """Dependency returning the configured scheduler"""
    return AutoReplyScheduler()
