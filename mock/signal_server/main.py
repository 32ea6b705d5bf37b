from fastapi import FastAPI
import os

from risk_galaxy.infrastructure.providers.mock import build_mock_signals, serialize_signal

app = FastAPI(title="Mock Signal Server", version="1.0.0")
SEED = int(os.environ.get("MOCK_SEED", "42"))
SNAPSHOT = build_mock_signals(SEED)

@app.get("/health")
def health(): return {"status": "ok"}

@app.get("/signals")
def get_signals():
    return {"files": [serialize_signal(s) for s in SNAPSHOT]}
