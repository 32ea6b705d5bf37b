"""Signal provider HTTP client for fetching per-file history"""

import httpx
from typing import Any, Dict, List
from risk_galaxy.domain.models import AuthorContribution, ChangeEvent, FileSignal
from risk_galaxy.domain.exceptions import SignalProviderError
from risk_galaxy.config import settings


def parse_signal(payload: Dict[str, Any]) -> FileSignal:
    """Build a FileSignal from the provider's camelCase JSON"""
    return FileSignal(
        id=str(payload["id"]),
        name=payload["name"],
        path=payload["path"],
        complexity=float(payload["complexity"]),
        historical_bugs=int(payload["historicalBugs"]),
        change_history=[ChangeEvent(days_ago=int(e["daysAgo"])) for e in payload.get("history", [])],
        authors=[
            AuthorContribution(name=a["name"], commits=int(a["commits"]))
            for a in payload["authors"]
        ],
    )


class HttpSignalProvider:
    """Client for an external file signal API"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.signal_provider_url
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    async def get_signals(self) -> List[FileSignal]:
        """
        Fetch the current signal snapshot for all tracked files.

        Raises:
            SignalProviderError: On timeout, HTTP errors, or invalid response
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(f"{self.base_url}/signals")
                response.raise_for_status()
                data = response.json()

                return [parse_signal(item) for item in data.get("files", [])]

            except httpx.TimeoutException as e:
                raise SignalProviderError(f"Signal provider timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise SignalProviderError(f"Signal provider error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise SignalProviderError(f"Signal provider unreachable: {e}") from e
            except (KeyError, ValueError, TypeError, AttributeError) as e:
                raise SignalProviderError(f"Invalid signal data from provider: {e}") from e
