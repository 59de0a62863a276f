"""
Crypto configuration module.

Provides configuration for the primcrypt services.
Open for extension through custom configurations.
"""
from dataclasses import dataclass
import logging

from .logging import setup_logging


PADDING_DETERMINISTIC = 'deterministic'
PADDING_SECURE = 'secure'


@dataclass
class CryptoConfig:
    """
    Complete crypto configuration.
    
    Selects the PKCS#1 v1.5 padding source used by RSAService and the
    level of the package loggers.
    """
    # PKCS#1 v1.5 Type 2 padding source ('deterministic' or 'secure')
    padding: str = PADDING_DETERMINISTIC
    
    # Logging
    log_level: int = logging.WARNING
    
    @classmethod
    def default(cls) -> 'CryptoConfig':
        """Create default configuration (reproducible padding)."""
        return cls()
    
    @classmethod
    def secure(cls, **kwargs) -> 'CryptoConfig':
        """Create configuration that pads RSA messages from a CSPRNG."""
        return cls(padding=PADDING_SECURE, **kwargs)
    
    def create_padding_source(self):
        """Build the padding source named by this configuration."""
        from .crypto.rsa.padding import DeterministicPaddingSource, SecurePaddingSource
        
        if self.padding == PADDING_DETERMINISTIC:
            return DeterministicPaddingSource()
        if self.padding == PADDING_SECURE:
            return SecurePaddingSource()
        raise ValueError(f"Unknown padding source: {self.padding!r}")
    
    def apply_logging(self) -> None:
        """Set the primcrypt loggers to log_level."""
        setup_logging(self.log_level)
