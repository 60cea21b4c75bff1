"""
Global pytest fixtures and configuration for test suite.

This module provides reusable fixtures for:
- Decoder settings
- Sample email data
- Temporary files
"""

import os

import pytest
import structlog

from eml_decoder.config import DecoderSettings
from .fixtures.emails import SAMPLE_EMAILS


@pytest.fixture
def decoder_settings() -> DecoderSettings:
    """
    Create decoder settings with the documented defaults.

    Returns:
        DecoderSettings instance independent of the environment
    """
    return DecoderSettings(
        default_charset="UTF-8",
        default_transfer_encoding="7bit",
        detect_undeclared_charset=False,
        unfold_part_headers=False,
        max_nesting_depth=32,
        log_level="INFO",
        log_json=False,  # Easier to read in tests
    )


@pytest.fixture
def sample_eml_bytes() -> bytes:
    """
    Get simple plain text email bytes for basic tests.

    Returns:
        bytes of a simple .eml file
    """
    return SAMPLE_EMAILS["simple_plain_text"]


@pytest.fixture
def multipart_mixed_eml() -> bytes:
    """
    Get two-part multipart email (quoted-printable text + base64 binary).

    Returns:
        bytes of multipart/mixed email with boundary XYZ
    """
    return SAMPLE_EMAILS["multipart_mixed"]


@pytest.fixture
def nested_multipart_eml() -> bytes:
    """
    Get multipart/alternative nested inside multipart/mixed with an attachment.

    Returns:
        bytes of nested multipart email
    """
    return SAMPLE_EMAILS["nested_multipart"]


@pytest.fixture
def attachment_eml() -> bytes:
    """
    Get email with single PDF attachment.

    Returns:
        bytes of email with document.pdf attachment
    """
    return SAMPLE_EMAILS["attachment"]


@pytest.fixture
def malformed_eml() -> bytes:
    """
    Get malformed email for error handling tests.

    Returns:
        bytes of invalid RFC5322 data
    """
    return SAMPLE_EMAILS["malformed"]


@pytest.fixture
def tmp_eml_file(tmp_path) -> str:
    """
    Create temporary .eml file for file-based tests.

    Args:
        tmp_path: pytest's temporary directory fixture

    Returns:
        Path to temporary .eml file
    """
    eml_path = tmp_path / "test_email.eml"
    eml_path.write_bytes(SAMPLE_EMAILS["attachment"])
    return str(eml_path)


@pytest.fixture(autouse=True)
def reset_env_vars():
    """
    Reset environment variables before each test.

    This prevents test pollution from env var changes.
    """
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore the default structlog configuration after each test."""
    yield
    structlog.reset_defaults()


def pytest_configure(config):
    """
    Configure pytest with custom markers and settings.
    """
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
