"""
Test Configuration and Fixtures

Environment setup MUST happen before any application import: the logging
configuration reads TEST_LOG_DIR at import time.
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('DEPLOY_ENV', 'test')


_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402

import pytest  # noqa: E402

from src.platform.config.di import container  # noqa: E402


@pytest.fixture(autouse=True)
def reset_container_singletons() -> Generator[None, None, None]:
    """Each test gets fresh gateway singletons from the container"""
    yield
    container.reset_singletons()
