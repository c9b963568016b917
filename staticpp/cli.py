"""Command-line entry point: ``build <src_path> [-o output_path]``."""

from __future__ import annotations

import sys

from staticpp.generator import Generator

USAGE = "Usage: ssg build <src_path> [-o output_path]"


def main(argv: list[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)

    if len(args) < 2 or args[0] != "build":
        print(USAGE, file=sys.stderr)
        return 1

    src_path = args[1]
    out_path = None
    if len(args) == 4 and args[2] == "-o":
        out_path = args[3]
    elif len(args) > 2:
        print(f"Invalid arguments.\n{USAGE}", file=sys.stderr)
        return 1

    try:
        Generator(src_path, out_path)
    except RuntimeError as exc:
        print(f"error happened when creating generator: {exc}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())