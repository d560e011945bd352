"""Shared fixtures for FormatBridge tests"""

import pytest

from formatbridge.config import reset_data_manager
from formatbridge.utils.logging import FormatBridgeLogger


@pytest.fixture(autouse=True)
def isolated_user_data(tmp_path, monkeypatch):
    """Point the user data directory at a temp dir and reset singletons"""
    user_dir = tmp_path / "userdata"
    monkeypatch.setenv("FORMATBRIDGE_DATA_DIR", str(user_dir))
    reset_data_manager()
    yield user_dir
    reset_data_manager()
    FormatBridgeLogger.cleanup()


@pytest.fixture
def sample_inputs():
    """One well-formed input per source format"""
    return {
        "json": '[{"name": "Ada", "age": 36, "active": true}]',
        "xml": "<person><name>Ada</name><age>36</age></person>",
        "yaml": "name: Ada\nage: 36\n",
        "csv": "name,age\nAda,36\n",
        "tsv": "name\tage\nAda\t36\n",
        "plaintext": "Hello World",
        "morse": ".... . .-.. .-.. --- / .-- --- .-. .-.. -..",
    }
