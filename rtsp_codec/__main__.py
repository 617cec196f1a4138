import sys
import argparse
import logging

from rtsp_codec import (
    Request,
    read_request,
    read_response,
    write_request,
    write_response,
)

from typing import BinaryIO, List, Optional

INPUT_HELP = "Path to a file holding a single RTSP message, or `-` for stdin"
OUTPUT_HELP = "Where to write the re-encoded message, or `-` for stdout"
RESPONSE_HELP = "Parse the input as a response instead of a request"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Parse an RTSP message and write it back in canonical form",
        prog="python -m rtsp_codec",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("input", help=INPUT_HELP)
    parser.add_argument("-o", "--output", help=OUTPUT_HELP, default="-")
    parser.add_argument("--response", action="store_true", help=RESPONSE_HELP)
    parser.add_argument("-v", "--verbose", action="store_true", help="Add debug prints")
    return parser


def _open_input(path: str) -> BinaryIO:
    if path == "-":
        return sys.stdin.buffer
    return open(path, "rb")


def _open_output(path: str) -> BinaryIO:
    if path == "-":
        return sys.stdout.buffer
    return open(path, "wb")


def run(args: argparse.Namespace) -> None:
    logger = logging.getLogger(__name__)
    read = read_response if args.response else read_request
    write = write_response if args.response else write_request

    input_stream = _open_input(args.input)
    try:
        message = read(input_stream)
    finally:
        if args.input != "-":
            input_stream.close()

    if isinstance(message, Request):
        logger.info(f"{message.method.as_string()} {message.uri} {message.protocol}")
    else:
        logger.info(
            f"{message.protocol} {message.status.code} {message.status.reason_phrase()}"
        )
    for header, value in message.headers.items():
        logger.info(f"{header}: {value}")
    logger.info(f"Body of {len(message.body)} bytes")

    output_stream = _open_output(args.output)
    try:
        write(output_stream, message)
    finally:
        if args.output != "-":
            output_stream.close()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=logging_level, format="[%(levelname)s][%(name)s] %(message)s"
    )

    try:
        run(args)
    except Exception as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
