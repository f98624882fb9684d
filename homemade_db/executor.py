"""
Statement Executor - Executes prepared statements

This module provides:
- ExecutionResult: the value returned for every executed statement
- StatementExecutor: dispatches a Statement to its per-type executor

There is no storage engine yet. INSERT and SELECT are acknowledged with
a NOT_IMPLEMENTED result so callers can tell them apart from real work.
"""

from dataclasses import dataclass
from enum import Enum
import logging

from .parser import Statement, StatementType

logger = logging.getLogger(__name__)


class ExecutionStatus(Enum):
    SUCCESS = 'success'
    NOT_IMPLEMENTED = 'not_implemented'  # acknowledged, nothing persisted
    FAILURE = 'failure'


@dataclass(frozen=True)
class ExecutionResult:
    """Result of StatementExecutor.execute()"""
    status: ExecutionStatus
    message: str = ''
    reason: str = ''

    @classmethod
    def ok(cls, message: str = '') -> 'ExecutionResult':
        return cls(ExecutionStatus.SUCCESS, message)

    @classmethod
    def not_implemented(cls, message: str) -> 'ExecutionResult':
        return cls(ExecutionStatus.NOT_IMPLEMENTED, message)

    @classmethod
    def failure(cls, reason: str) -> 'ExecutionResult':
        return cls(ExecutionStatus.FAILURE, reason=reason)

    @property
    def succeeded(self) -> bool:
        """True when the statement ran or was acknowledged"""
        return self.status is not ExecutionStatus.FAILURE


class StatementExecutor:
    """Executes statements - the seam where a storage engine attaches"""

    def __init__(self):
        self._handlers = {
            StatementType.INSERT: self.execute_insert,
            StatementType.SELECT: self.execute_select,
        }

    def execute(self, statement: Statement) -> ExecutionResult:
        """Main entry point - dispatch to specific executors"""
        if not isinstance(statement, Statement):
            logger.error("refusing to execute %r", statement)
            return ExecutionResult.failure(f"Unknown statement: {statement!r}")

        handler = self._handlers[statement.statement_type]
        result = handler(statement)
        logger.debug("executed %s -> %s", statement.statement_type.name, result.status.name)
        return result

    # ========================================================================
    # INSERT
    # ========================================================================

    def execute_insert(self, statement: Statement) -> ExecutionResult:
        return ExecutionResult.not_implemented("This is where we would do an insert.")

    # ========================================================================
    # SELECT
    # ========================================================================

    def execute_select(self, statement: Statement) -> ExecutionResult:
        return ExecutionResult.not_implemented("This is where we would do a select.")
