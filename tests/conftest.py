"""Pytest fixtures for testing"""

import random
import pytest
from typing import Callable, List
from fastapi.testclient import TestClient
from risk_galaxy.api.main import create_app
from risk_galaxy.api.dependencies import get_random_source, get_signal_provider
from risk_galaxy.domain.models import AuthorContribution, ChangeEvent, FileSignal
from risk_galaxy.infrastructure.providers.mock import MockSignalProvider


class StaticSignalProvider:
    """Provider returning a fixed list of signals"""

    def __init__(self, signals: List[FileSignal]):
        self.signals = signals

    async def get_signals(self) -> List[FileSignal]:
        return list(self.signals)


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for repeatable trends"""
    return random.Random(1234)


@pytest.fixture
def make_signal() -> Callable[..., FileSignal]:
    """Factory for file signals with sensible defaults"""

    def _make(
        id: str = "f1",
        complexity: float = 50,
        historical_bugs: int = 2,
        recent_changes: int = 5,
        old_changes: int = 0,
        commits: List[int] | None = None,
    ) -> FileSignal:
        history = [ChangeEvent(days_ago=i % 31) for i in range(recent_changes)]
        history += [ChangeEvent(days_ago=31 + i) for i in range(old_changes)]
        authors = [
            AuthorContribution(name=f"dev{i}", commits=c)
            for i, c in enumerate(commits if commits is not None else [60, 40])
        ]
        return FileSignal(
            id=id,
            name=f"{id}.py",
            path=f"src/{id}.py",
            complexity=complexity,
            historical_bugs=historical_bugs,
            change_history=history,
            authors=authors,
        )

    return _make


@pytest.fixture
def client() -> TestClient:
    """FastAPI test client backed by the seeded mock provider"""
    app = create_app()
    app.dependency_overrides[get_signal_provider] = lambda: MockSignalProvider(seed=42)
    app.dependency_overrides[get_random_source] = lambda: random.Random(0)
    return TestClient(app)


@pytest.fixture
def client_factory() -> Callable[[List[FileSignal]], TestClient]:
    """Build a test client serving an explicit signal set"""

    def _make(signals: List[FileSignal]) -> TestClient:
        app = create_app()
        app.dependency_overrides[get_signal_provider] = lambda: StaticSignalProvider(signals)
        app.dependency_overrides[get_random_source] = lambda: random.Random(0)
        return TestClient(app)

    return _make
