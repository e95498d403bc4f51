"""Command-line interface for appletree.

Exit Codes:
    0: Successful completion
    1: Invalid arguments, missing path or runtime error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Show the current directory, hiding dot-entries, two levels deep
    $ appletree -e . -d 2

    # Show only one file and the folders leading to it
    $ appletree /path/to/project -o src/util/log.h
"""

import logging
import sys
from typing import Optional, Sequence

from appletree.appletree import StreamingAppleTree
from appletree.cli.argparser import build_config, create_parser
from appletree.cli.safe_writer import SafeWriter
from appletree.cli.signal_handler import setup_signal_handling, signal_handler
from appletree.renderer import Colorizer

# Left margin in front of every tree line
MARGIN = " "


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; DEBUG with --verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the appletree command-line interface.

    Args:
        argv: Arguments without the program name. Defaults to ``sys.argv[1:]``.
    """
    setup_signal_handling()

    arguments = list(sys.argv[1:] if argv is None else argv)
    parser = create_parser()

    # The bare word 'help' anywhere on the command line shows the help text
    if "help" in arguments:
        parser.print_help()
        return

    args = parser.parse_args(arguments)
    configure_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        config = build_config(args)
        logger.debug("Rendering %s with %s", config.root, config)

        output_file = args.output if args.output else sys.stdout.fileno()
        with SafeWriter(output_file) as safe_writer:
            colorizer = Colorizer.for_stream(args.color, safe_writer)
            analyzer = StreamingAppleTree(config, colorizer=colorizer)
            try:
                if args.json:
                    for chunk in analyzer.stream_json():
                        safe_writer.write(chunk)
                else:
                    safe_writer.write("\n")
                    for line in analyzer.stream_tree():
                        safe_writer.write(MARGIN + line)

                if args.summary:
                    safe_writer.write("\n" + MARGIN + analyzer.format_summary() + "\n")

            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
