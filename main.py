import argparse
import argcomplete
import logging
import sys

from stackbrowser.cli import run_recent, run_search, run_show
from stackbrowser.conf.config import settings
from stackbrowser.core.sorting import AnswerFilter
from stackbrowser.services.connectivity import always_online


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="StackBrowser: browse Stack Overflow questions and answers."
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging for troubleshooting.",
    )
    parser.add_argument(
        "--stack-key",
        default=settings.STACK_API_KEY,
        help="Stack Exchange API key for increased quota.",
    )
    parser.add_argument(
        "--skip-connectivity-check",
        action="store_true",
        help="Do not probe the network before each request.",
    )

    subparsers = parser.add_subparsers(
        dest="command", required=True, help="Command to execute"
    )

    # Recent Command
    subparsers.add_parser("recent", help="List recently active questions.")

    # Search Command
    search_parser = subparsers.add_parser(
        "search", help="Search question titles."
    )
    search_parser.add_argument("query", help="Title text to search for.")

    # Show Command
    show_parser = subparsers.add_parser(
        "show", help="Show a question with its answers."
    )
    show_parser.add_argument("question_id", type=int, help="Question identifier.")
    show_parser.add_argument(
        "--sort",
        choices=[f.value for f in AnswerFilter],
        default=AnswerFilter.VOTES.value,
        help="Answer ordering: Votes, Active or Oldest (default: Votes).",
    )

    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    class ColoredFormatter(logging.Formatter):
        """Custom formatter with colors for different log levels."""

        COLORS = {
            "DEBUG": "\033[36m",  # Cyan
            "INFO": "\033[32m",  # Green
            "WARNING": "\033[33m",  # Yellow
            "ERROR": "\033[31m",  # Red
            "CRITICAL": "\033[35m",  # Magenta
        }
        RESET = "\033[0m"

        def format(self, record):
            color = self.COLORS.get(record.levelname, self.RESET)
            record.levelname = f"{color}{record.levelname}{self.RESET}"
            record.name = f"\033[34m{record.name}{self.RESET}"  # Blue for logger name
            return super().format(record)

    handler = logging.StreamHandler()
    handler.setFormatter(ColoredFormatter("%(levelname)s %(name)s: %(message)s"))

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    root_logger.addHandler(handler)

    # Silence noisy libraries unless verbose
    if not verbose:
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    probe = always_online if args.skip_connectivity_check else None

    if args.command == "recent":
        return run_recent(stack_key=args.stack_key, is_network_available=probe)
    if args.command == "search":
        return run_search(
            args.query, stack_key=args.stack_key, is_network_available=probe
        )
    if args.command == "show":
        return run_show(
            args.question_id,
            answer_filter=args.sort,
            stack_key=args.stack_key,
            is_network_available=probe,
        )
    return 2


if __name__ == "__main__":
    sys.exit(main())
