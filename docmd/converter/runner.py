import argparse
import logging
import sys

from ..config import DECODER_CHOICES, load_config
from ..file_ops import ensure_dir, file_exists, get_output_path
from ..logger import setup_logger
from .errors import DocmdError, InputNotFoundError
from .pipeline import PDFConverter

logger = logging.getLogger("docmd")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="docmd", description="Convert documents to Markdown")

    parser.add_argument("inputs", nargs="+", help="Input files (.pdf, .json run dumps)")
    parser.add_argument("--output", "-o", default="", help="Output file or directory")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose output")

    # Config overrides
    parser.add_argument("--decoder", choices=DECODER_CHOICES, help="Glyph decoding strategy")
    parser.add_argument("--decode-offset", type=int, help="Code point offset for the offset decoder")
    parser.add_argument("--line-tolerance", type=float, help="Max y distance for fragments on one line (0 = exact)")
    parser.add_argument("--workers", type=int, help="Parallel page rendering workers")
    return parser


def convert_file(converter: PDFConverter, input_path: str, output_option: str) -> None:
    if not file_exists(input_path):
        raise InputNotFoundError(input_path)
    out = get_output_path(input_path, output_option)
    ensure_dir(out.parent)
    logger.debug("Output: %s", out)
    converter.convert(input_path, out)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = load_config()
    except ValueError as e:
        print(f"Error: invalid DOCMD_* environment setting: {e}", file=sys.stderr)
        return 1
    if args.decoder:
        cfg.decoder = args.decoder
    if args.decode_offset is not None:
        cfg.decode_offset = args.decode_offset
    if args.line_tolerance is not None:
        cfg.line_tolerance = max(0.0, args.line_tolerance)
    if args.workers is not None:
        cfg.workers = max(1, args.workers)
    if args.verbose:
        cfg.log_level = "DEBUG"

    setup_logger("docmd", cfg.log_level)
    converter = PDFConverter(cfg)
    try:
        for input_path in args.inputs:
            logger.debug("Processing: %s", input_path)
            convert_file(converter, input_path, args.output)
            logger.debug("Successfully converted: %s", input_path)
    except DocmdError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
