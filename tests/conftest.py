import pytest

from serverforge.app.application.provisioning.tracker import ProgressTracker
from serverforge.app.domain.hosts.entities import Host
from tests.unit.fakes.executor import FakeRemoteExecutor
from tests.unit.fakes.session import FakeSession, FakeSessionContext
from tests.unit.fakes.sink import FakeProgressSink
from tests.unit.fakes.uow import FakeUnitOfWork


@pytest.fixture
def uow() -> FakeUnitOfWork:
    return FakeUnitOfWork()


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def sink() -> FakeProgressSink:
    return FakeProgressSink()


@pytest.fixture
def tracker(uow: FakeUnitOfWork, session: FakeSession, sink: FakeProgressSink) -> ProgressTracker:
    return ProgressTracker(
        session_factory=lambda: FakeSessionContext(session),
        uow_factory=lambda _session: uow,  # type: ignore[arg-type]
        sink=sink,
    )


@pytest.fixture
def executor() -> FakeRemoteExecutor:
    return FakeRemoteExecutor()


@pytest.fixture
def host() -> Host:
    return Host(name="web-1", public_ip="203.0.113.10", ssh_port=22)
