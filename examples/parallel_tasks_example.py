"""
Parallel Tasks Example

This example demonstrates how to:
1. Point the engine at handler files with a glob pattern
2. Instantiate the discovered classes to register their handlers
3. Execute every handler for a task name concurrently
4. Tell successful results from failures
"""

import asyncio
import logging
from pathlib import Path

from parallel_tasks import ParallelTasks, get_registry

TASKS_DIR = Path(__file__).resolve().parent / "tasks"


async def main() -> None:
    """Main execution function."""
    print("=" * 60)
    print("Parallel Tasks Example")
    print("=" * 60)

    engine = ParallelTasks({"tasks": [str(TASKS_DIR / "*.py")]})

    # Discovery only collects classes; instantiating them registers handlers
    handler_classes = await engine.initialize()
    print(f"\nDiscovered classes: {[cls.__name__ for cls in handler_classes]}")
    for handler_class in handler_classes:
        handler_class()

    print(f"Registered handlers: {len(get_registry())}")

    payment = {"pix_key": "11999887766", "amount": 15_000}
    results = await engine.execute("PAYMENT_VALIDATION", payment)

    print("\nResults (registration order):")
    for result in results:
        if isinstance(result, Exception):
            print(f"  FAILED: {type(result).__name__}: {result}")
        else:
            print(f"  OK: {result}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    asyncio.run(main())
