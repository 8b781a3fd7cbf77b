"""
Command line interface for sending SMS through the websms gateway.

Connection settings are read from WEBSMS_* environment variables (or a
.env file), see ``ConnectionConfig.from_env``.

Usage:
  websms text --to 4367612345678 --message "Hello" --test
  websms binary --to 4367612345678 --segment 0605040b8423f0 --udh
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .client import Client
from .constants import LogConfig
from .exceptions import WebSmsError, ParameterValidationException
from .messages import Message, TextMessage, BinaryMessage


def _common_fields(args: argparse.Namespace) -> dict:
    return {
        "sender_address": args.sender,
        "client_message_id": args.client_message_id,
    }


def build_text_message(args: argparse.Namespace) -> Message:
    return TextMessage(args.to, args.message, **_common_fields(args))


def build_binary_message(args: argparse.Namespace) -> Message:
    segments = []
    for index, segment in enumerate(args.segment):
        try:
            segments.append(bytes.fromhex(segment))
        except ValueError as e:
            raise ParameterValidationException(
                f"Segment {index} is not valid hex",
                field="segment",
                value=segment
            ) from e

    return BinaryMessage(
        args.to,
        segments,
        user_data_header_present=args.udh,
        **_common_fields(args)
    )


def cmd_send(args: argparse.Namespace) -> int:
    """Build the message from args and send it"""
    try:
        message = args.build(args)
        client = Client.from_env()

        if args.verbose:
            client.set_verbose(True)

        response = client.send(
            message,
            max_sms_per_message=args.max_sms,
            test_mode=True if args.test else None
        )
    except WebSmsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(response.to_dict(), indent=2))
    else:
        print(f"SMS accepted ({response.status_code} {response.status_message}). Transfer ID: {response.transfer_id}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="websms", description="Send SMS through the websms gateway")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--to", action="append", required=True, help="Recipient MSISDN, repeat for several")
    common.add_argument("--sender", help="Sender address")
    common.add_argument("--client-message-id", help="Id echoed back by the gateway")
    common.add_argument("--max-sms", type=int, help="Maximum SMS segments per message")
    common.add_argument("--test", action="store_true", help="Simulate delivery, do not send")
    common.add_argument("--json", action="store_true", help="Print the full response as JSON")
    common.add_argument("-v", "--verbose", action="store_true", help="Log request and response details")

    subparsers = parser.add_subparsers(dest="command", required=True)

    text = subparsers.add_parser("text", parents=[common], help="Send a text message")
    text.add_argument("--message", required=True, help="Message text")
    text.set_defaults(func=cmd_send, build=build_text_message)

    binary = subparsers.add_parser("binary", parents=[common], help="Send a binary message")
    binary.add_argument("--segment", action="append", required=True, help="Hex encoded segment, repeat for several")
    binary.add_argument("--udh", action="store_true", help="Segments start with a user data header")
    binary.set_defaults(func=cmd_send, build=build_binary_message)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LogConfig.DEFAULT_LOG_LEVEL,
        format=LogConfig.DEFAULT_LOG_FORMAT
    )

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
