"""
homemadeDB - Embryonic Database Engine

The front-end command loop: meta-commands, statement preparation and a
stubbed executor awaiting a storage engine.
"""

__version__ = '0.1.0'

from homemade_db.parser import (
    StatementType, Statement, PrepareResult, PreparedStatement, prepare_statement
)
from homemade_db.executor import StatementExecutor, ExecutionResult, ExecutionStatus
from homemade_db.repl import REPL, MetaCommandResult, LoopAction, InputSourceError

__all__ = [
    'StatementType', 'Statement', 'PrepareResult', 'PreparedStatement', 'prepare_statement',
    'StatementExecutor', 'ExecutionResult', 'ExecutionStatus',
    'REPL', 'MetaCommandResult', 'LoopAction', 'InputSourceError',
]
