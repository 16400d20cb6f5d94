"""Unit tests configuration file."""

from pathlib import Path

import pytest

from scalastruct.generator.source import DirectorySource

CLASSES_DIR = Path(__file__).parent / "generator" / "classes"


def pytest_configure(config):
    """Disable verbose output when running tests."""
    terminal = config.pluginmanager.getplugin("terminal")
    if terminal:
        terminal.TerminalReporter.showfspath = False


@pytest.fixture
def classes_dir():
    """Directory of class descriptors for com.acme.{Account,Address,Legacy}."""
    return CLASSES_DIR


@pytest.fixture
def source(classes_dir):
    return DirectorySource(classes_dir)
