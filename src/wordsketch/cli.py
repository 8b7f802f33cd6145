"""wordsketch CLI entry point.

Usage: wordsketch [command]
"""
import argparse
import logging
import sys
from pathlib import Path

from wordsketch.sketch.errors import SketchError
from wordsketch.sketch.hasher import available_hashers


def _add_sizing_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--error-rate", type=float, default=0.0005,
        help="Overestimate bound as a fraction of total tokens (default: 0.0005)",
    )
    p.add_argument(
        "--confidence", type=float, default=0.99,
        help="Probability the error bound holds (default: 0.99)",
    )


def _add_count_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "count",
        help="Count a text file with a sketch and compare against exact counts.",
    )
    p.add_argument("path", type=Path, help="UTF-8 text file to count")
    _add_sizing_args(p)
    p.add_argument(
        "--hasher", choices=available_hashers(), default="xxh3",
        help="Row hash function (default: xxh3)",
    )
    p.add_argument(
        "--word", action="append", default=[],
        help="Word to look up after counting; repeatable. Stemmed first.",
    )
    p.add_argument(
        "--png-dir", type=Path, default=None,
        help="Write compressedSketch.png and compressedExactCounts.png here.",
    )
    p.add_argument(
        "--png-width", type=int, default=150,
        help="Image width in pixels (default: 150)",
    )


def _add_size_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "size",
        help="Print the sketch dimensions for an accuracy target.",
    )
    _add_sizing_args(p)


def _run_count(args: argparse.Namespace) -> None:
    from wordsketch.codec.compress import compress_counts, compress_sketch
    from wordsketch.codec.image import write_png
    from wordsketch.driver.pipeline import run_corpus
    from wordsketch.driver.report import format_lookup, format_report
    from wordsketch.sketch.hasher import get_hasher
    from wordsketch.text.tokenizer import stem

    text = args.path.read_text(encoding="utf-8")
    result, sketch, counts = run_corpus(
        text,
        error_rate=args.error_rate,
        confidence=args.confidence,
        hasher=get_hasher(args.hasher),
    )
    print(format_report(result, label=args.path.name))

    if args.word:
        print()
        print(format_lookup([stem(w) for w in args.word], sketch, counts))

    if args.png_dir is not None:
        args.png_dir.mkdir(parents=True, exist_ok=True)
        sketch_png = write_png(
            args.png_dir / "compressedSketch.png",
            compress_sketch(sketch), width=args.png_width,
        )
        counts_png = write_png(
            args.png_dir / "compressedExactCounts.png",
            compress_counts(counts), width=args.png_width,
        )
        print()
        print(f"Wrote {sketch_png}")
        print(f"Wrote {counts_png}")


def _run_size(args: argparse.Namespace) -> None:
    from wordsketch.driver.report import format_dimensions
    from wordsketch.sketch.sizing import dimensions

    print(format_dimensions(dimensions(args.error_rate, args.confidence)))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="wordsketch",
        description="Approximate word frequencies with a Count-Min Sketch.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log progress at INFO level.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_count_parser(subparsers)
    _add_size_parser(subparsers)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        if args.command == "count":
            _run_count(args)
        elif args.command == "size":
            _run_size(args)
    except (SketchError, OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(2)
