"""Command line argument parsing."""

import argparse
import sys

from serialmonitor import __version__
from serialmonitor.domain import BaudRate, LineEnding
from serialmonitor.infrastructure.config import DEFAULT_CONFIG_PATH


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace with:
        - port: Serial device to open (optional, auto-detected)
        - baud: Baud rate override
        - line_ending: Outbound line ending override
        - timestamp: Whether to prefix lines with capture time
        - autoscroll: Whether to follow the newest line
        - config: Path to YAML config file
        - list_ports: Whether to list ports and exit
        - verbose: Whether to show detailed logs
    """
    parser = argparse.ArgumentParser(
        description="Serial Monitor - live view of a serial device's output",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "commands while running:\n"
            "  /baud N              change baud rate (reconnects)\n"
            "  /eol NAME            none, newline, cr, both\n"
            "  /timestamp on|off    prefix new lines with capture time\n"
            "  /autoscroll on|off   follow the newest line\n"
            "  /clear               clear the output\n"
            "  /quit                exit\n"
            "  //text               send text starting with '/'"
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "port",
        nargs="?",
        default=None,
        help="Serial device, e.g. /dev/ttyACM0 or COM3 (default: auto-detect)",
    )
    parser.add_argument(
        "-b",
        "--baud",
        type=int,
        default=None,
        choices=[rate.value for rate in BaudRate],
        metavar="RATE",
        help=f"Baud rate (default: {BaudRate.default().value})",
    )
    parser.add_argument(
        "-e",
        "--line-ending",
        default=None,
        help=f"Line ending appended to sent text (default: {LineEnding.default().name.lower()})",
    )
    parser.add_argument(
        "-t",
        "--timestamp",
        action="store_true",
        default=None,
        help="Prefix each line with its capture time",
    )
    parser.add_argument(
        "--no-autoscroll",
        dest="autoscroll",
        action="store_false",
        default=None,
        help="Do not follow the newest line",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=DEFAULT_CONFIG_PATH,
        help=f"Path to YAML config file (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "-l",
        "--list-ports",
        action="store_true",
        help="List available serial ports and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show detailed logs",
    )

    args = parser.parse_args(argv)

    # Handle port listing early (before the monitor starts)
    if args.list_ports:
        from serialmonitor.cli.display import print_ports
        from serialmonitor.infrastructure.serial import SerialPortDetector

        print_ports(SerialPortDetector().detect_ports())
        sys.exit(0)

    return args


def build_overrides(args: argparse.Namespace) -> dict[str, dict]:
    """Map parsed arguments onto config sections."""
    return {
        "serial": {
            "port": args.port,
            "baud_rate": args.baud,
        },
        "display": {
            "line_ending": args.line_ending,
            "timestamp": args.timestamp,
            "autoscroll": args.autoscroll,
        },
    }
