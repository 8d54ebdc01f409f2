import argparse
import asyncio
import logging
import sys

from job_board.config import LOG_LEVEL, PAGE_SIZE
from job_board.controller import JobListController
from job_board.formatter import JobFormatter
from job_board.models import CATEGORIES

logger = logging.getLogger(__name__)

PROMPT = "> "
HELP_TEXT = """Commands:
  n          next page
  p          previous page
  s TERM     search titles (empty TERM clears the search)
  c CAT      filter by category (IT, Design, Marketing; empty clears)
  x          clear all filters
  r          try again (full reload)
  q          quit"""


def render(controller: JobListController) -> None:
    print(JobFormatter.format_view(controller))


async def run_once(page: int = 1, search: str = "", category: str = "") -> int:
    """Load a single page, apply the filters and print it. Returns the exit code."""
    controller = JobListController(page_size=PAGE_SIZE)
    controller.set_search(search)
    controller.set_category(category)

    await controller.go_to_page(page)
    render(controller)
    return 1 if controller.state.error else 0


async def handle_command(controller: JobListController, line: str) -> bool:
    """
    Apply one interactive command to the controller.
    Returns False when the user asked to quit.
    """
    command, _, arg = line.strip().partition(" ")
    arg = arg.strip()

    if command == "q":
        return False
    if command == "n":
        if not await controller.next_page():
            print("Already on the last page.")
    elif command == "p":
        if not await controller.previous_page():
            print("Already on the first page.")
    elif command == "s":
        controller.set_search(arg)
    elif command == "c":
        try:
            controller.set_category(arg)
        except ValueError as e:
            print(e)
            return True
    elif command == "x":
        controller.clear_filters()
    elif command == "r":
        await controller.reload()
    else:
        print(HELP_TEXT)
        return True

    render(controller)
    return True


async def run_interactive(page: int = 1, search: str = "", category: str = "") -> None:
    """Render the listing and keep reading commands until 'q' or end of input."""
    controller = JobListController(page_size=PAGE_SIZE)
    controller.set_search(search)
    controller.set_category(category)

    await controller.go_to_page(page)
    render(controller)
    print(HELP_TEXT)

    while True:
        try:
            line = await asyncio.to_thread(input, PROMPT)
        except EOFError:
            break
        if not await handle_command(controller, line):
            break

    logger.info("Interactive session ended.")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="job-board",
        description="Browse a searchable, paginated list of placeholder job listings.",
    )
    parser.add_argument(
        "--page",
        type=int,
        default=1,
        metavar="N",
        help="Page to load first (default: 1). Must be a positive integer.",
    )
    parser.add_argument(
        "--search",
        default="",
        metavar="TERM",
        help="Only show jobs whose title contains TERM (case-insensitive).",
    )
    parser.add_argument(
        "--category",
        default="",
        choices=["", *CATEGORIES],
        help="Only show jobs in this category.",
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Keep the listing open and read navigation commands from stdin.",
    )
    return parser.parse_args(argv)


def cli(argv: list[str] | None = None) -> None:
    """CLI entry point for the package."""
    args = parse_args(argv)

    # Set up logging once, in the application entry point only
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=LOG_LEVEL
    )

    if args.page <= 0:
        logger.error("--page must be a positive integer.")
        sys.exit(1)

    if args.interactive:
        asyncio.run(run_interactive(args.page, args.search, args.category))
        return

    exit_code = asyncio.run(run_once(args.page, args.search, args.category))
    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    cli()
