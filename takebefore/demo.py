"""Small demonstrations of take_before in call and pipe form."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from takebefore.view import take_before

__all__ = ["direct_usage", "pipe_usage", "main"]


def direct_usage() -> str:
    """Show the direct call syntax on a list of numbers."""
    values = [10, 20, 30, 40]
    original = " ".join(str(v) for v in values)
    taken = " ".join(str(v) for v in take_before(values, 30))
    return f"Original: {original}\nTake before 30: {taken}\n"


def pipe_usage() -> str:
    """Show the pipe syntax on a string."""
    text = "Hello, world! Stop here."
    taken = "".join(text | take_before("!"))
    return f"Full string: {text}\nTake before '!': {taken}\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Print both demonstrations."""
    parser = argparse.ArgumentParser(
        prog="takebefore-demo",
        description="Show the elements of a sequence that come before a delimiter.",
    )
    parser.parse_args(argv)
    print(direct_usage(), end="")
    print(pipe_usage(), end="")
    return 0