"""Pytest configuration for the enumwarp test suite."""
import textwrap

import pytest

from enumwarp.config import Settings


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (may require network or database access)"
    )


@pytest.fixture
def status_source():
    """A typical paren-mode enum file."""
    return textwrap.dedent('''\
        package com.example.enums;

        import lombok.Getter;

        @Getter
        public enum Status {
            OK(0, "Green"),
            NG(1, "Red");

            private final int code;
            private final String label;

            Status(int code, String label) {
                this.code = code;
                this.label = label;
            }
        }
    ''')


@pytest.fixture
def settings():
    return Settings(
        webhook_secret='s3cret',
        github_token=None,
        target_branch='refs/heads/master',
        target_schema='enums',
    )
