import pytest

from hr_portal.core.container import build_container
from hr_portal.infrastructure.storage import SqlSlotRepository, build_engine, build_session_factory, init_storage
from hr_portal.modules.store import PersistentStore

from tests.helpers import ADMIN_EMAIL, ADMIN_PASSWORD, TODAY, make_settings


@pytest.fixture
def settings(tmp_path):
    """File-backed settings so a second container sees the same data."""
    return make_settings(f"sqlite:///{tmp_path / 'portal.db'}")


@pytest.fixture
def make_container(settings):
    """Build a container; calling it again simulates a process restart."""
    built = []

    def _make(custom_settings=None):
        container = build_container(custom_settings or settings, today=lambda: TODAY)
        built.append(container)
        return container

    yield _make
    for container in built:
        container.shutdown()


@pytest.fixture
def container(make_container):
    return make_container()


@pytest.fixture
def portal(container):
    return container.portal


@pytest.fixture
def admin_portal(portal):
    portal.login(ADMIN_EMAIL, ADMIN_PASSWORD)
    return portal


@pytest.fixture
def memory_settings():
    return make_settings("sqlite://")


@pytest.fixture
def slots(memory_settings):
    """Slot repository over an in-memory database."""
    engine = build_engine(memory_settings)
    init_storage(engine)
    yield SqlSlotRepository(build_session_factory(engine))
    engine.dispose()


@pytest.fixture
def store(slots, memory_settings):
    return PersistentStore(slots, memory_settings.storage, memory_settings.admin)
