"""Pytest configuration to isolate tests from user config files."""

import tempfile
import pytest
from pathlib import Path
from unittest.mock import patch

@pytest.fixture(autouse=True)
def isolate_config(monkeypatch):
    """Automatically isolate each test from user config files and GITSH_* variables."""
    with tempfile.TemporaryDirectory() as temp_home:
        monkeypatch.setenv('HOME', temp_home)
        # Also set USERPROFILE for Windows compatibility
        monkeypatch.setenv('USERPROFILE', temp_home)
        monkeypatch.delenv('GITSH_GIT_COMMAND', raising=False)
        monkeypatch.delenv('GITSH_DEBUG', raising=False)
        
        with patch.object(Path, 'home', return_value=Path(temp_home)):
            yield
