"""
REPL - Read-Eval-Print Loop interface for the database

Provides the interactive command loop:
- Meta-commands (.exit)
- Statement preparation and execution
- Explicit end-of-input policy (graceful shutdown or hard failure)

Every line is classified, dispatched and answered by handle_line(), which
returns a LoopAction instead of exiting the process. start() turns the
EXIT action into an exit status for the caller.
"""

from enum import Enum
from typing import Callable, Optional, TextIO
import logging
import sys

from . import config
from .executor import StatementExecutor
from .parser import prepare_statement

logger = logging.getLogger(__name__)


class InputSourceError(RuntimeError):
    """Input stream ended or failed while the 'fail' EOF policy is active"""


class MetaCommandResult(Enum):
    SUCCESS = 'success'
    UNRECOGNIZED_COMMAND = 'unrecognized_command'
    EXIT = 'exit'


class LoopAction(Enum):
    """What the loop does after one line has been dispatched"""
    CONTINUE = 'continue'
    EXIT = 'exit'
    END_OF_INPUT = 'end_of_input'


class REPL:
    """Interactive shell for database commands"""

    def __init__(self, executor: Optional[StatementExecutor] = None,
                 input_func: Callable[[str], str] = input,
                 out: Optional[TextIO] = None,
                 on_eof: str = config.ON_EOF,
                 prompt: str = config.PROMPT):
        if on_eof not in config.EOF_POLICIES:
            raise ValueError(f"Unknown EOF policy: {on_eof!r} (expected one of {config.EOF_POLICIES})")

        self.executor = executor if executor is not None else StatementExecutor()
        self.input_func = input_func
        self.out = out
        self.on_eof = on_eof
        self.prompt = prompt

        # Literal -> handler; a new meta-command is a new entry here
        self.meta_commands: dict = {
            '.exit': self._meta_exit,
        }

    def start(self) -> int:
        """Main command loop, returns the process exit status"""
        logger.info("REPL started (on_eof=%s)", self.on_eof)

        while True:
            try:
                line = self.read_line()
            except KeyboardInterrupt:
                self._print()
                self._print(config.INTERRUPT_HINT)
                continue

            action = self.handle_line(line)

            if action is LoopAction.EXIT:
                logger.info("REPL stopped by .exit")
                return config.EXIT_SUCCESS
            if action is LoopAction.END_OF_INPUT:
                return self._end_of_input()

    def read_line(self) -> Optional[str]:
        """Print the prompt and read one line; None when the stream is over"""
        try:
            return self.input_func(self.prompt)
        except EOFError:
            logger.debug("input stream reached end of file")
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.error("failed to read input: %s", e)
            self._print(f"Input error: {e}")
            return None

    def handle_line(self, line: Optional[str]) -> LoopAction:
        """Classify one line and dispatch it"""
        if line is None:
            return LoopAction.END_OF_INPUT

        if not line:
            return LoopAction.CONTINUE

        if line.startswith(config.META_COMMAND_PREFIX):
            return self._handle_meta_command(line)

        self._execute_statement(line)
        return LoopAction.CONTINUE

    def do_meta_command(self, line: str) -> MetaCommandResult:
        """Look up a meta-command by its exact literal"""
        handler = self.meta_commands.get(line)
        if handler is None:
            return MetaCommandResult.UNRECOGNIZED_COMMAND
        return handler()

    def _handle_meta_command(self, line: str) -> LoopAction:
        result = self.do_meta_command(line)

        if result is MetaCommandResult.SUCCESS:
            return LoopAction.CONTINUE
        if result is MetaCommandResult.UNRECOGNIZED_COMMAND:
            self._print(config.UNRECOGNIZED_COMMAND_FORMAT.format(line))
            return LoopAction.CONTINUE
        if result is MetaCommandResult.EXIT:
            self._print(config.EXIT_MESSAGE)
            return LoopAction.EXIT
        raise ValueError(f"Unhandled meta-command result: {result}")

    def _meta_exit(self) -> MetaCommandResult:
        return MetaCommandResult.EXIT

    def _execute_statement(self, line: str):
        """Prepare and execute a statement"""
        prepared = prepare_statement(line)
        if not prepared.succeeded:
            self._print(config.UNRECOGNIZED_KEYWORD_FORMAT.format(line))
            return

        result = self.executor.execute(prepared.statement)

        if result.message:
            self._print(result.message)
        if result.succeeded:
            self._print(config.EXECUTED_MESSAGE)
        else:
            self._print(f"Error: {result.reason}")

    def _end_of_input(self) -> int:
        if self.on_eof == config.EOF_FAIL:
            raise InputSourceError("Input stream ended before .exit")

        logger.info("input stream ended, shutting down")
        return config.EXIT_SUCCESS

    def _print(self, text: str = ''):
        print(text, file=self.out if self.out is not None else sys.stdout)
