"""
Shared pytest fixtures for world clock tests.
"""
import pytest
from PySide6.QtCore import QCoreApplication


@pytest.fixture(scope='session')
def qapp_cls():
    """No widgets are created, so pytest-qt only needs a core application."""
    return QCoreApplication


@pytest.fixture(scope='session')
def qt_app(qapp):
    """QCoreApplication instance shared by the whole session."""
    yield qapp
    # Don't quit - causes issues with pytest


@pytest.fixture
def settings_path(tmp_path):
    """INI file backing the settings store for one test."""
    return str(tmp_path / "worldclock.ini")


@pytest.fixture
def settings_manager(qt_app, settings_path):
    """Create an INI-backed SettingsManager for testing."""
    from core.settings import SettingsManager
    manager = SettingsManager(organization="Test", application="WorldClockTest", path=settings_path)
    yield manager
    manager.clear()


@pytest.fixture
def favorites_store(settings_manager):
    """Create an empty, loaded FavoritesStore."""
    from core.clock.favorites import FavoritesStore
    store = FavoritesStore(settings_manager)
    store.load()
    return store
