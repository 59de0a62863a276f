"""Core primcrypt components: configuration, errors, logging and primitives."""
from .config import CryptoConfig
from .exceptions import (
    CryptoException,
    PreconditionError,
    DivisionByZeroError,
    DerDecodeError,
    AuthenticationError,
    MessageTooLongError,
)
from .logging import get_logger, setup_logging

__all__ = [
    'CryptoConfig',
    'CryptoException',
    'PreconditionError',
    'DivisionByZeroError',
    'DerDecodeError',
    'AuthenticationError',
    'MessageTooLongError',
    'get_logger',
    'setup_logging',
]
