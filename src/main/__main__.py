"""
Main module entry point.

Runs the pre-traffic hook once outside the Lambda runtime:

    python -m src.main                  # connectivity test event
    python -m src.main event.json       # lifecycle hook event from a file
"""

import argparse
import json
import os
import sys
from pathlib import Path
from types import SimpleNamespace
from typing import Any, List, Optional

from src.shared.consts import CONNECTIVITY_TEST_EVENT


def _load_event(path: Optional[str]) -> Any:
    if path is None:
        return CONNECTIVITY_TEST_EVENT
    if path == "-":
        return json.load(sys.stdin)
    return json.loads(Path(path).read_text(encoding="utf-8"))


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="python -m src.main",
        description="Run the pre-traffic fitness hook locally.",
    )
    parser.add_argument(
        "event",
        nargs="?",
        help="Path to a JSON lifecycle hook event, '-' for stdin",
    )
    parser.add_argument(
        "--function-name",
        default=os.environ.get("AWS_LAMBDA_FUNCTION_NAME", "local-pre-traffic-hook"),
        help="Name the hook runs as; excluded from function smoke tests",
    )
    args = parser.parse_args(argv)

    # Imported late: the handler configures logging and settings on import.
    from .handler import handler

    context = SimpleNamespace(
        function_name=args.function_name,
        function_version="$LATEST",
        aws_request_id="local",
    )
    result = handler(_load_event(args.event), context)
    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
