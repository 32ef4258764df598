import logging

from app.core.logging_config import setup_logging, sanitize_log_data, REDACTED


def test_sanitize_redacts_nested_secrets():
    data = {
        "name": "Jane",
        "retell_api_key": "key_123",
        "context": {"access_token": "abc", "topic": "APIs"},
        "items": [{"password": "pw"}],
    }

    sanitized = sanitize_log_data(data)

    assert sanitized["name"] == "Jane"
    assert sanitized["retell_api_key"] == REDACTED
    assert sanitized["context"] == {"access_token": REDACTED, "topic": "APIs"}
    assert sanitized["items"] == [{"password": REDACTED}]
    assert data["retell_api_key"] == "key_123"


def test_setup_logging_writes_to_log_dir(tmp_path):
    setup_logging("debug", log_dir=str(tmp_path / "logs"))

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert (tmp_path / "logs").is_dir()
    assert logging.getLogger("botocore").level == logging.WARNING

    setup_logging("WARNING", log_dir=str(tmp_path / "logs"))
