"""
Main entry point for homemadeDB

Usage:
    python -m homemade_db.main [--execute <line>] [--file <path>] [--on-eof {shutdown,fail}]

Example:
    python -m homemade_db.main --execute "insert 1 alice"
"""

import argparse
import logging
import sys

from . import config
from .executor import StatementExecutor
from .repl import REPL, InputSourceError

logger = logging.getLogger('homemade_db')

# Handlers attached by setup_logging()
_installed_handlers = []


def main(argv=None):
    """Main entry point"""
    parser = argparse.ArgumentParser(
        description='homemadeDB - Embryonic Database Engine',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Start the interactive prompt
  python -m homemade_db.main

  # Dispatch a single line and exit
  python -m homemade_db.main --execute "select"

  # Feed every line of a file through the prompt
  python -m homemade_db.main --file commands.txt
        """
    )

    parser.add_argument(
        '--execute', '-e',
        metavar='LINE',
        help='Dispatch one line and exit'
    )

    parser.add_argument(
        '--file', '-f',
        metavar='FILE',
        help='Dispatch every line of a file'
    )

    parser.add_argument(
        '--on-eof',
        choices=config.EOF_POLICIES,
        default=config.ON_EOF,
        help=f'What to do when input ends without .exit (default: {config.ON_EOF})'
    )

    parser.add_argument(
        '--log-file',
        metavar='PATH',
        help=f'Write log records to PATH (default with --debug: {config.LOG_FILE})'
    )

    parser.add_argument('--debug', action='store_true', default=config.DEBUG,
                        help='Log at DEBUG level')
    parser.add_argument('--verbose', '-v', action='store_true', default=config.VERBOSE,
                        help='Mirror log records to stderr')

    args = parser.parse_args(argv)

    setup_logging(args.log_file, args.debug, args.verbose)

    executor = StatementExecutor()

    # Execute mode
    if args.execute is not None:
        return execute_line(executor, args.execute)

    # File mode
    if args.file:
        return execute_file(executor, args.file, args.on_eof)

    # Interactive REPL mode
    repl = REPL(executor, on_eof=args.on_eof)
    return run(repl)


def setup_logging(log_file=None, debug=False, verbose=False):
    """Attach handlers to the package logger; silent when nothing is asked for

    Handlers installed by a previous call are closed and replaced.
    """
    for handler in _installed_handlers:
        logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    formatter = logging.Formatter(config.LOG_FORMAT)

    if debug and not log_file:
        log_file = config.LOG_FILE

    if log_file:
        _installed_handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    if verbose:
        _installed_handlers.append(logging.StreamHandler(sys.stderr))

    if not _installed_handlers:
        _installed_handlers.append(logging.NullHandler())

    for handler in _installed_handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)


def run(repl: REPL) -> int:
    """Run a REPL to completion and map a fatal input failure to a status"""
    try:
        return repl.start()
    except InputSourceError as e:
        logger.error("%s", e)
        print(f"Error: {e}", file=sys.stderr)
        return config.EXIT_FAILURE


def execute_line(executor: StatementExecutor, line: str) -> int:
    """Dispatch a single line"""
    repl = REPL(executor)
    repl.handle_line(line)
    return config.EXIT_SUCCESS


def execute_file(executor: StatementExecutor, filename: str, on_eof: str = config.ON_EOF) -> int:
    """Dispatch every line of a file, stopping at .exit"""
    try:
        with open(filename, 'r', encoding='utf-8') as f:
            lines = [line.rstrip('\r\n') for line in f]
    except FileNotFoundError:
        print(f"Error: File not found: {filename}", file=sys.stderr)
        return config.EXIT_FAILURE
    except (OSError, UnicodeDecodeError) as e:
        logger.error("cannot read %s: %s", filename, e)
        print(f"Error: {e}", file=sys.stderr)
        return config.EXIT_FAILURE

    remaining = iter(lines)

    def read_from_file(prompt):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    repl = REPL(executor, input_func=read_from_file, on_eof=on_eof)
    return run(repl)


if __name__ == '__main__':
    sys.exit(main())
