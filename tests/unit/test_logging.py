"""Tests for logging helpers."""
import logging

import pytest

import primcrypt
from primcrypt.core.logging import get_logger


class TestGetLogger:
    """Test suite for get_logger."""
    
    def test_returns_named_logger(self):
        """Test the logger carries the requested name."""
        logger = get_logger("primcrypt.test_module")
        
        assert isinstance(logger, logging.Logger)
        assert logger.name == "primcrypt.test_module"
    
    def test_propagates(self):
        """Test loggers propagate to the root logger."""
        assert get_logger("primcrypt.propagation").propagate is True
    
    def test_same_instance(self):
        """Test repeated calls return the same logger."""
        assert get_logger("primcrypt.same") is get_logger("primcrypt.same")


class TestSetupLogging:
    """Test suite for primcrypt.setup_logging."""
    
    @pytest.fixture(autouse=True)
    def restore_levels(self):
        """Restore logger levels after each test."""
        names = ["primcrypt"] + [n for n in logging.root.manager.loggerDict if n.startswith("primcrypt.")]
        saved = {name: logging.getLogger(name).level for name in names}
        yield
        for name, level in saved.items():
            logging.getLogger(name).setLevel(level)
    
    def test_sets_package_levels(self):
        """Test the package and module loggers get the requested level."""
        primcrypt.setup_logging(logging.DEBUG)
        
        assert logging.getLogger("primcrypt").level == logging.DEBUG
        assert logging.getLogger("primcrypt.core.crypto.rsa.padding").level == logging.DEBUG
    
    def test_default_level_info(self):
        """Test the default level is INFO."""
        primcrypt.setup_logging()
        
        assert logging.getLogger("primcrypt").level == logging.INFO
