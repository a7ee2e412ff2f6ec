"""Shared pytest fixtures and configuration."""

from datetime import datetime

import pytest

from support_diagnostics.settings import DiagnosticConfig


@pytest.fixture
def fixed_now():
    """Fixed point in time for synthesized output directory names."""
    return datetime(2024, 5, 17, 9, 30, 5)


@pytest.fixture
def basic_auth_config():
    """Configuration using basic authentication with a password."""
    return DiagnosticConfig(
        host_port="es.example.com:9243",
        node_name="data1",
        auth_type="basic",
        auth_creds="elastic",
        auth_password="changeme",
    )
