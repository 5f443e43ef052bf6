"""Payment validation handlers checking the PIX key."""

import asyncio
from typing import Any

from parallel_tasks import register_task


class PixKeyValidator:
    @register_task("PAYMENT_VALIDATION")
    async def check_pix_key(self, payment: dict[str, Any]) -> str:
        await asyncio.sleep(0.1)
        if not payment.get("pix_key"):
            raise ValueError("Missing PIX key")
        return "pix key ok"

    @register_task("PAYMENT_VALIDATION")
    async def check_blocklist(self, payment: dict[str, Any]) -> str:
        await asyncio.sleep(0.3)
        raise RuntimeError("Blocklist service unavailable")
