"""
Module: conftest.py

Date: 2026-10-19

Global pytest configuration and fixtures for the flowcanvas test suite.
Includes CI-friendly setup for PyQt5 testing and common graph fixtures.
"""

import os

# Widgets are created in tests; never try to open a real display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from flowcanvas.domain.graph import Edge, GraphSnapshot, Node, Position


def pytest_configure(config):
    """Configure pytest with custom settings."""
    config.addinivalue_line("markers", "gui: mark test as requiring GUI")


def pytest_collection_modifyitems(session, config, items):
    """Skip GUI tests on CI."""
    _ = session
    _ = config

    is_ci = "CI" in os.environ or "GITHUB_ACTIONS" in os.environ
    if is_ci:
        skip_gui = pytest.mark.skip(reason="GUI tests don't work on CI")
        for item in items:
            if "gui" in item.keywords:
                item.add_marker(skip_gui)


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication for all tests (QObject signals need one)."""
    from PyQt5.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def qt_cleanup(qapp):
    """Process pending events between tests."""
    yield
    from PyQt5.QtCore import QCoreApplication

    QCoreApplication.processEvents()


@pytest.fixture
def sample_graph():
    """The starter graph: four nodes in a chain plus a branch."""
    return GraphSnapshot(
        nodes=(
            Node("n1", Position(0, 0), type="input", data={"label": "Start"}),
            Node("n2", Position(200, 0), data={"label": "Process"}),
            Node("n3", Position(400, 0), type="output", data={"label": "End"}),
            Node("n4", Position(200, 150), data={"label": "Branch"}),
        ),
        edges=(
            Edge("e1-2", "n1", "n2", type="smoothstep"),
            Edge("e2-3", "n2", "n3", type="smoothstep"),
            Edge("e2-4", "n2", "n4", type="smoothstep", data={"label": "maybe"}),
        ),
    )
