from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
for root in (str(PROJECT_ROOT), str(SRC_ROOT)):
    if root not in sys.path:
        sys.path.insert(0, root)

from blockgen.arduino import BOARD_CATALOG, generate_sketch
from blockgen.core import Block


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate an Arduino sketch from an example block program."
    )
    parser.add_argument(
        "--module",
        default="examples.spi_shift_register",
        help=(
            "Python module containing a Block program "
            "(default: examples.spi_shift_register)."
        ),
    )
    parser.add_argument(
        "--program",
        default="program",
        help="Attribute name of the top-level Block in the module (default: program).",
    )
    parser.add_argument(
        "--output",
        default="scratchpad/generated_sketch/generated_sketch.ino",
        help="Output file path (default: scratchpad/generated_sketch/generated_sketch.ino).",
    )
    parser.add_argument(
        "--board",
        choices=sorted(BOARD_CATALOG),
        default="uno",
        help="Target board (default: uno).",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on pin conflicts instead of warning.",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Also print generated source to stdout.",
    )
    return parser


def main() -> int:
    args = _build_parser().parse_args()

    try:
        module = importlib.import_module(args.module)
    except Exception as exc:
        print(f"Failed to import module {args.module!r}: {exc}", file=sys.stderr)
        return 1

    program_obj = getattr(module, args.program, None)
    if not isinstance(program_obj, Block):
        print(
            f"{args.module}.{args.program} is not a Block.",
            file=sys.stderr,
        )
        return 1

    try:
        source = generate_sketch(
            [program_obj],
            board=args.board,
            mode="strict" if args.strict else "warn",
        )
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(source, encoding="utf-8")

    print(f"Wrote {output_path} ({len(source.splitlines())} lines)")
    if args.stdout:
        print(source)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
