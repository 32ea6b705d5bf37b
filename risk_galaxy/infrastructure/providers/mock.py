"""In-memory signal provider with a seeded demo snapshot"""

import random
from typing import Any, Dict, List
from risk_galaxy.domain.models import AuthorContribution, ChangeEvent, FileSignal


def _random_history(rng: random.Random, count: int, max_days: int) -> List[ChangeEvent]:
    return [ChangeEvent(days_ago=rng.randrange(max_days)) for _ in range(count)]


def build_mock_signals(seed: int) -> List[FileSignal]:
    """Five demo files; change ages are drawn from a seeded generator"""
    rng = random.Random(seed)
    return [
        FileSignal(
            id="1",
            name="auth.service.js",
            path="src/services/auth.service.js",
            complexity=85,
            historical_bugs=12,
            change_history=_random_history(rng, 15, 60),
            authors=[AuthorContribution("dev1", 50), AuthorContribution("dev2", 45)],
        ),
        FileSignal(
            id="2",
            name="payment.gateway.js",
            path="src/integrations/payment.gateway.js",
            complexity=92,
            historical_bugs=8,
            change_history=_random_history(rng, 20, 30),
            authors=[
                AuthorContribution("dev3", 30),
                AuthorContribution("dev4", 28),
                AuthorContribution("dev5", 25),
            ],
        ),
        FileSignal(
            id="3",
            name="utils.js",
            path="src/utils/utils.js",
            complexity=20,
            historical_bugs=1,
            change_history=[ChangeEvent(45), ChangeEvent(100)],
            authors=[AuthorContribution("dev1", 80)],
        ),
        FileSignal(
            id="4",
            name="socket.server.js",
            path="src/socket/socket.server.js",
            complexity=70,
            historical_bugs=5,
            change_history=_random_history(rng, 12, 40),
            authors=[AuthorContribution("dev2", 40), AuthorContribution("dev6", 10)],
        ),
        FileSignal(
            id="5",
            name="db.config.js",
            path="src/config/db.js",
            complexity=15,
            historical_bugs=0,
            change_history=[ChangeEvent(200)],
            authors=[AuthorContribution("dev1", 100)],
        ),
    ]


def serialize_signal(signal: FileSignal) -> Dict[str, Any]:
    """Wire format served by the mock signal server"""
    return {
        "id": signal.id,
        "name": signal.name,
        "path": signal.path,
        "complexity": signal.complexity,
        "historicalBugs": signal.historical_bugs,
        "history": [{"daysAgo": e.days_ago} for e in signal.change_history],
        "authors": [{"name": a.name, "commits": a.commits} for a in signal.authors],
    }


class MockSignalProvider:
    """Serves the same snapshot for the lifetime of the instance"""

    def __init__(self, seed: int = 42):
        self._signals = build_mock_signals(seed)

    async def get_signals(self) -> List[FileSignal]:
        return list(self._signals)
