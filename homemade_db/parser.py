"""
Statement Preparer - turns a line of input into a typed Statement

This module provides:
- StatementType: the closed set of statement kinds and their keywords
- Statement / PreparedStatement: the values handed to the executor
- prepare_statement(): case-insensitive keyword prefix matching

Statements carry no operands yet; row values, column lists and predicates
will be parsed here once the storage layer exists.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
import logging

logger = logging.getLogger(__name__)


class StatementType(Enum):
    """Statement kinds, matched in declaration order"""
    INSERT = 'insert'
    SELECT = 'select'

    @property
    def keyword(self) -> str:
        return self.value

    def __str__(self):
        return self.value


class PrepareResult(Enum):
    SUCCESS = 'success'
    UNRECOGNIZED_STATEMENT = 'unrecognized_statement'


@dataclass(frozen=True)
class Statement:
    """A prepared statement, consumed once by the executor"""
    statement_type: StatementType


@dataclass(frozen=True)
class PreparedStatement:
    """Outcome of prepare_statement(); statement is set iff result is SUCCESS"""
    result: PrepareResult
    statement: Optional[Statement] = None

    def __post_init__(self):
        if self.succeeded and self.statement is None:
            raise ValueError("Successful PreparedStatement requires a statement")
        if not self.succeeded and self.statement is not None:
            raise ValueError(f"{self.result.name} PreparedStatement cannot carry a statement")

    @property
    def succeeded(self) -> bool:
        return self.result is PrepareResult.SUCCESS


def prepare_statement(text: str) -> PreparedStatement:
    """
    Classify statement text by its leading keyword.

    Matching is case-insensitive and prefix-based: 'INSERT', 'insert 1 a b'
    and 'inserted' all prepare as INSERT. Leading whitespace is not skipped.
    """
    lowered = text.lower()
    for statement_type in StatementType:
        if lowered.startswith(statement_type.keyword):
            logger.debug("prepared %s statement from %r", statement_type.name, text)
            return PreparedStatement(PrepareResult.SUCCESS, Statement(statement_type))

    logger.debug("no statement keyword at start of %r", text)
    return PreparedStatement(PrepareResult.UNRECOGNIZED_STATEMENT)
