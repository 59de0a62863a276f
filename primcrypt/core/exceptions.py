"""
Custom exceptions for primcrypt operations.

This module defines exception classes raised by the class-based crypto API.
The function API in ``primcrypt.core.crypto`` turns the recoverable ones
into ``None``/``False`` results.
"""
from typing import Optional


class CryptoException(Exception):
    """Base exception for all primcrypt errors."""
    
    def __init__(self, message: str, error_code: Optional[int] = None) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            error_code: Numeric error code (if available)
        """
        self.error_code = error_code
        super().__init__(message)


class PreconditionError(CryptoException, ArithmeticError):
    """Raised when a BigInt operation is called outside its contract."""
    pass


class DivisionByZeroError(PreconditionError, ZeroDivisionError):
    """Raised on BigInt division or modulo by zero."""
    pass


class DerDecodeError(CryptoException):
    """Exception raised when DER key material cannot be parsed."""
    
    def __init__(
        self,
        message: str,
        offset: Optional[int] = None,
        error_code: Optional[int] = None
    ) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            offset: Byte offset in the DER buffer where parsing stopped
            error_code: Numeric error code (if available)
        """
        self.offset = offset
        super().__init__(message, error_code)


class AuthenticationError(CryptoException):
    """Exception raised when an authentication tag does not match."""
    pass


class MessageTooLongError(CryptoException):
    """Exception raised when a message does not fit the RSA modulus."""
    
    def __init__(
        self,
        message: str,
        max_length: Optional[int] = None,
        error_code: Optional[int] = None
    ) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            max_length: Largest message length the key accepts
            error_code: Numeric error code (if available)
        """
        self.max_length = max_length
        super().__init__(message, error_code)
