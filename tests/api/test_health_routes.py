"""Health & Readiness — liveness always 200, readiness depends on the store.

Tests:
    - Liveness is independent of the store
    - Readiness creates the pool lazily when none exists yet
    - An unreachable store reports 503 not_ready
"""

import showroom.infrastructure.database as db_module


class _Manager:
    instances: list = []
    healthy = True

    def __init__(self, *args, **kwargs):
        _Manager.instances.append(self)

    async def health_check(self) -> bool:
        return self.healthy


class _DownManager(_Manager):
    healthy = False


async def test_liveness(client):
    res = await client.get("/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_creates_pool_on_first_probe(client, monkeypatch):
    _Manager.instances = []
    monkeypatch.setattr(db_module, "db_manager", None)
    monkeypatch.setattr(db_module, "DatabaseSessionManager", _Manager)

    res = await client.get("/health/ready")

    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"
    assert len(_Manager.instances) == 1
    assert db_module.db_manager is _Manager.instances[0]


async def test_readiness_unreachable_store_is_503(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", _DownManager())

    res = await client.get("/health/ready")

    assert res.status_code == 503
    assert res.json() == {"status": "not_ready", "reason": "database_unavailable"}


async def test_readiness_reuses_existing_pool(client, monkeypatch):
    existing = _Manager()
    monkeypatch.setattr(db_module, "db_manager", existing)

    res = await client.get("/health/ready")

    assert res.status_code == 200
    assert db_module.db_manager is existing
