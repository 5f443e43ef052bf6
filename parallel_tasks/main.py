"""
Command line entry point.
Discovers handlers from glob patterns, runs one task and prints each result.
"""

import asyncio
import json
import logging
import sys
from typing import Any

from parallel_tasks.exceptions import ModuleLoadError, NoTasksFoundError
from parallel_tasks.executor.infrastructure.parallel_tasks import ParallelTasks

logger = logging.getLogger(__name__)

USAGE = "usage: python -m parallel_tasks.main TASK_NAME PATTERN [PATTERN ...] [--context JSON]"


def parse_args(argv: list[str]) -> tuple[str, list[str], Any]:
    """
    Split command line arguments into task name, patterns and context.

    Raises:
        ValueError: If the arguments are incomplete or the context is not JSON.
    """
    args = list(argv)
    context: Any = {}
    if "--context" in args:
        index = args.index("--context")
        if index + 1 >= len(args):
            raise ValueError("--context requires a JSON value")
        context = json.loads(args[index + 1])
        del args[index : index + 2]

    if len(args) < 2:
        raise ValueError(USAGE)
    return args[0], args[1:], context


def format_result(result: Any) -> str:
    if isinstance(result, BaseException):
        return f"error: {type(result).__name__}: {result}"
    return f"ok: {result!r}"


async def run(task_name: str, patterns: list[str], context: Any) -> list[Any]:
    """
    Discover handlers from the patterns, register them and execute the task.
    """
    engine = ParallelTasks({"tasks": patterns})
    instances = await engine.bootstrap()
    logger.info("Registered handlers from %d class(es)", len(instances))
    return await engine.execute(task_name, context)


def main(argv: list[str] | None = None) -> int:
    try:
        task_name, patterns, context = parse_args(sys.argv[1:] if argv is None else argv)
    except ValueError as e:
        print(e, file=sys.stderr)
        return 2

    try:
        results = asyncio.run(run(task_name, patterns, context))
    except NoTasksFoundError as e:
        logging.error(f"[Execution Error] {e}")
        return 1
    except ModuleLoadError as e:
        logging.error(f"[Load Error] {e}")
        return 1

    for result in results:
        print(format_result(result))
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    sys.exit(main())
