"""
Custom exceptions for the ledger service.
"""
from typing import Any, Dict, Optional


class LedgerException(Exception):
    """Base exception for all ledger errors."""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize exception.
        
        Args:
            message: Error message
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class TableReadError(LedgerException):
    """Raised when the ledger table cannot be read from storage."""
    pass


class TableWriteError(LedgerException):
    """Raised when the ledger table cannot be written to storage."""
    pass


class ParsingError(LedgerException):
    """Raised when CSV content cannot be parsed."""
    pass


class ExportError(LedgerException):
    """Raised when CSV or spreadsheet export fails."""
    pass


class UploadError(LedgerException):
    """Raised when an attachment cannot be stored."""
    pass


class ValidationError(LedgerException):
    """Raised when a field edit is rejected."""
    pass


class DataNotFoundError(LedgerException):
    """Raised when a requested line item does not exist."""
    pass


class ConfigurationError(LedgerException):
    """Raised when configuration is invalid."""
    pass
