"""
Shared fixtures for the configuration tests.
"""

import logging

import pytest
import yaml

from wls_exporter.configuration import ExporterConfig
from wls_exporter.infrastructure.logging_setup import ROOT_LOGGER_NAME

EXPECTED_HOST = "somehost"
EXPECTED_PORT = 3456
EXPECTED_USERNAME = "testuser"
EXPECTED_PASSWORD = "letmein"

SERVLET_CONFIG = """---
host: somehost
port: 3456
queries:
- applicationRuntimes:
    key: name
    componentRuntimes:
      type: WebAppComponentRuntime
      prefix: webapp_config_
      key: name
      values: [deploymentState, type, contextRoot, sourceInfo, openSessionsHighCount, openSessionsCurrentCount, sessionsOpenedTotalCount]
      servlets:
        prefix: weblogic_servlet_
        key: servletName
        values: [invocationTotalCount, executionTimeTotal]
"""

WORK_MANAGER_CONFIG = """---
host: otherhost
port: 9876
queries:
- applicationRuntimes:
    key: name
    workManagerRuntimes:
      prefix: workmanager_
      key: applicationName
      values: [pendingRequests, completedRequests, stuckThreadCount]
"""


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo logging setup done by CLI tests so caplog keeps seeing records."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def load_from_string(text: str) -> ExporterConfig:
    return ExporterConfig.load_config(yaml.safe_load(text))


@pytest.fixture
def servlet_config() -> ExporterConfig:
    """Configuration with one applicationRuntimes -> componentRuntimes -> servlets query."""
    return load_from_string(SERVLET_CONFIG)


@pytest.fixture
def work_manager_config() -> ExporterConfig:
    """Configuration with one applicationRuntimes -> workManagerRuntimes query."""
    return load_from_string(WORK_MANAGER_CONFIG)


@pytest.fixture
def empty_config() -> ExporterConfig:
    return load_from_string("")


@pytest.fixture
def config_file(tmp_path):
    """Write YAML text to a file in a temporary directory and return its path."""
    def _write(text: str, name: str = "config.yml"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
