"""Payment validation handlers checking amounts."""

import asyncio
import logging
from typing import Any

from parallel_tasks import register_task

logger = logging.getLogger(__name__)

DAILY_LIMIT = 500_000


class PaymentLimits:
    @register_task("PAYMENT_VALIDATION")
    async def check_amount(self, payment: dict[str, Any]) -> str:
        logger.info("Checking amount of %s", payment)
        await asyncio.sleep(0.2)
        if payment["amount"] <= 0:
            raise ValueError("Amount must be positive")
        return "amount ok"

    @register_task("PAYMENT_VALIDATION")
    def check_daily_limit(self, payment: dict[str, Any]) -> str:
        if payment["amount"] > DAILY_LIMIT:
            raise ValueError(f"Amount exceeds daily limit of {DAILY_LIMIT}")
        return "daily limit ok"
