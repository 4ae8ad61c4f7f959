"""
Errors raised while loading and validating a minefield
"""
from enum import Enum
from typing import Optional


class MinefieldError(Exception):
    """Base class for all minefield errors"""


class ParseError(MinefieldError):
    """Malformed input line (wrong field count or non-numeric field)"""

    def __init__(self, message: str, line: str, line_number: int, field: Optional[str] = None):
        super().__init__(message)
        self.line = line
        self.line_number = line_number
        self.field = field  # None when the field count is wrong


class ValidationReason(Enum):
    """Why a mine was rejected by the field"""
    NEGATIVE_POWER = "negative_power"
    DUPLICATE_ID = "duplicate_id"
    DUPLICATE_COORDINATES = "duplicate_coordinates"


class ValidationError(MinefieldError):
    """Mine cannot be added to the field"""

    def __init__(self, message: str, reason: ValidationReason, mine_id: int):
        super().__init__(message)
        self.reason = reason
        self.mine_id = mine_id
