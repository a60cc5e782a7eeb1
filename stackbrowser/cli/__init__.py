# CLI commands module
from stackbrowser.cli.search import run_recent, run_search
from stackbrowser.cli.show import run_show

__all__ = [
    "run_recent",
    "run_search",
    "run_show",
]
