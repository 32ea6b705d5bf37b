"""Dependency injection for FastAPI endpoints"""

import random
from fastapi import Depends, Request
from risk_galaxy.config import settings
from risk_galaxy.domain.galaxy import GalaxyPipeline, SignalProvider
from risk_galaxy.domain.trend import RandomSource
from risk_galaxy.infrastructure.providers.http import HttpSignalProvider
from risk_galaxy.infrastructure.providers.mock import MockSignalProvider


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_signal_provider() -> SignalProvider:
    """Provide the configured file signal provider"""
    if settings.signal_provider == "http":
        return HttpSignalProvider()
    return MockSignalProvider(seed=settings.mock_seed)


def get_random_source() -> RandomSource:
    """Provide the trend jitter source (seeded when trend_seed is set)"""
    return random.Random(settings.trend_seed)


def get_pipeline(
    provider: SignalProvider = Depends(get_signal_provider),
    rng: RandomSource = Depends(get_random_source),
) -> GalaxyPipeline:
    """Provide a fresh pipeline per request"""
    return GalaxyPipeline(provider, rng)
