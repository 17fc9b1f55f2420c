import argparse
import logging
import sys
from typing import Optional

from life_tools import Pattern
from life_tools.errors import RleError
from life_tools.version import __version__

try:
    from IPython.lib.pretty import pprint
except ImportError:
    from pprint import pprint

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="life-tools command line utility.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Be more verbose.")
    parser.add_argument("--version", action="version", version=__version__)

    subparsers = parser.add_subparsers(dest="command", required=True)

    show_parser = subparsers.add_parser("show", help="Show the pattern summary")
    show_parser.add_argument("input_file", help="Input RLE file")

    normalize_parser = subparsers.add_parser(
        "normalize", help="Rewrite the pattern in canonical form"
    )
    normalize_parser.add_argument("input_file", help="Input RLE file")
    normalize_parser.add_argument("output_file", help="Output RLE file")

    export_parser = subparsers.add_parser("export", help="Export pattern as image")
    export_parser.add_argument("input_file", help="Input RLE file")
    export_parser.add_argument("output_file", help="Output image file")

    debug_parser = subparsers.add_parser("debug", help="Show debug info for RLE file")
    debug_parser.add_argument("input_file", help="Input RLE file")

    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> Optional[int]:
    args = parse_args(argv)

    logging.basicConfig(level=logging.WARNING)
    package_logger = logging.getLogger("life_tools")
    if args.verbose:
        package_logger.setLevel(logging.DEBUG)
    else:
        package_logger.setLevel(logging.INFO)

    try:
        pattern = Pattern.open(args.input_file)
    except (RleError, OSError) as e:
        logger.error("%s: %s" % (args.input_file, e))
        return 1

    if args.command == "show":
        print("Size: %dx%d" % pattern.size)
        print("Rule: %s" % pattern.rule)
        print("Live cells: %d" % len(pattern))
        for line in pattern.comments:
            print(line)

    elif args.command == "normalize":
        pattern.normalize().save(args.output_file)

    elif args.command == "export":
        image = pattern.topil()
        if image is None:
            logger.error("%s: the pattern has an empty grid" % args.input_file)
            return 1
        image.save(args.output_file)

    elif args.command == "debug":
        pprint(pattern._record)

    return None


if __name__ == "__main__":
    sys.exit(main())
