"""Command-line interface for textcodec."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import textcodec
from textcodec.codec import decode_bytes, encode
from textcodec.enums import EncodingTag
from textcodec.errors import BinaryFileError, DecodeError, UnknownEncodingError
from textcodec.files import write_text
from textcodec.pipeline import DecodedText
from textcodec.pipeline.shift_jis import shift_jis_ratio

logger = logging.getLogger(__name__)

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _encoding_arg(value: str) -> EncodingTag:
    try:
        return EncodingTag.from_label(value)
    except UnknownEncodingError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _report(
    name: str, result: DecodedText | None, data: bytes, args: argparse.Namespace
) -> None:
    if result is None:
        print("binary" if args.minimal else f"{name}: binary")
    elif args.minimal:
        print(result.encoding.value)
    elif args.verbose:
        print(
            f"{name}: {result.encoding.value} "
            f"(shift-jis ratio {shift_jis_ratio(data):.2f})"
        )
    else:
        print(f"{name}: {result.encoding.value}")


def _process_file(filepath: str, args: argparse.Namespace) -> bool:
    """Detect (and optionally convert) one file.  Returns False on failure."""
    path = Path(filepath)
    try:
        data = path.read_bytes()
    except OSError as e:
        print(f"textcodec: {filepath}: {e}", file=sys.stderr)
        return False
    try:
        result = decode_bytes(data, args.encoding)
    except BinaryFileError:
        _report(filepath, None, data, args)
        return True
    except DecodeError as e:
        print(f"textcodec: {filepath}: {e}", file=sys.stderr)
        return False

    _report(filepath, result, data, args)

    if args.convert_to is not None and args.convert_to is not result.encoding:
        if encode(result.text, result.encoding) != data:
            print(
                f"textcodec: {filepath}: not converted, decoding as "
                f"{result.encoding} did not preserve the original bytes",
                file=sys.stderr,
            )
            return False
        try:
            write_text(path, result.text, args.convert_to)
        except OSError as e:
            print(f"textcodec: {filepath}: {e}", file=sys.stderr)
            return False
        logger.info(
            "converted %s: %s -> %s", filepath, result.encoding, args.convert_to
        )
    return True


def main(argv: list[str] | None = None) -> None:
    """Run the ``textcodec`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Detect the text encoding of files and convert between encodings."
    )
    parser.add_argument("files", nargs="*", help="Files to examine")
    parser.add_argument(
        "--minimal", action="store_true", help="Output only the encoding label"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Also show the Shift-JIS ratio"
    )
    parser.add_argument(
        "-e",
        "--encoding",
        type=_encoding_arg,
        default=None,
        help="Read files as this encoding instead of detecting it",
    )
    parser.add_argument(
        "--convert-to",
        type=_encoding_arg,
        default=None,
        metavar="ENCODING",
        help="Rewrite each text file in this encoding",
    )
    parser.add_argument(
        "--log-level", default="WARNING", choices=_LOG_LEVELS, help="Logging level"
    )
    parser.add_argument(
        "--version", action="version", version=f"textcodec {textcodec.__version__}"
    )

    args = parser.parse_args(argv)
    if args.convert_to is not None and not args.files:
        parser.error("--convert-to requires at least one file")
    logging.basicConfig(
        level=args.log_level, format="%(levelname)s %(name)s: %(message)s"
    )

    if not args.files:
        data = sys.stdin.buffer.read()
        try:
            result = decode_bytes(data, args.encoding)
        except BinaryFileError:
            _report("stdin", None, data, args)
            return
        except DecodeError as e:
            print(f"textcodec: stdin: {e}", file=sys.stderr)
            sys.exit(1)
        _report("stdin", result, data, args)
        return

    ok = True
    for filepath in args.files:
        ok = _process_file(filepath, args) and ok
    if not ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
