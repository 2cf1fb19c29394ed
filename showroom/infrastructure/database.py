"""Database Session Manager — pooled async engine that invokes stored procedures.

Invariants:
    - One engine (and one pool) per process, created lazily on first use
    - Every call checks out a pooled connection; commit on success, rollback on error
    - Result sets without columns (row counts) are skipped; order is preserved
    - Errors carrying the reserved error number become StoreRuleViolation;
      every other error is re-raised unchanged
    - Connection pool uses pool_pre_ping for stale connection detection

Design Decisions:
    - Raw driver cursor (aioodbc) for EXEC: SQLAlchemy results expose one result
      set, the list and detail procedures return two
    - Singleton db_manager never torn down per request; disposed on app shutdown
"""

import logging
import time
from collections.abc import Iterable
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine

from showroom.config import get_settings
from showroom.core.repository_protocols import ProcedureGateway, ResultSet
from showroom.core.store_signals import StoreRuleViolation, classify_store_error

logger = logging.getLogger(__name__)


def build_exec_statement(procedure: str, param_names: Iterable[str]) -> str:
    """EXEC statement with one qmark placeholder per named parameter."""
    assignments = ", ".join(f"@{name} = ?" for name in param_names)
    statement = f"SET NOCOUNT ON; EXEC {procedure}"
    if assignments:
        statement = f"{statement} {assignments}"
    return statement


async def read_result_sets(cursor) -> list[ResultSet]:
    """Drain every result set from an executed cursor as lists of column dicts."""
    result_sets: list[ResultSet] = []
    while True:
        if cursor.description:
            columns = [column[0] for column in cursor.description]
            rows = await cursor.fetchall()
            result_sets.append([dict(zip(columns, row)) for row in rows])
        if not await cursor.nextset():
            break
    return result_sets


class DatabaseSessionManager:
    """Owns the connection pool and runs stored procedures against it."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 10,
        max_overflow: int = 5,
        pool_recycle: int = 3600,
        procedure_schema: str = "functional",
    ):
        self.engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            pool_recycle=pool_recycle,
        )
        self.procedure_schema = procedure_schema

    def qualify(self, procedure: str) -> str:
        return f"[{self.procedure_schema}].[{procedure}]"

    async def call_procedure(
        self, procedure: str, params: dict[str, Any],
    ) -> list[ResultSet]:
        """Execute a stored procedure and return all of its result sets."""
        qualified = self.qualify(procedure)
        statement = build_exec_statement(qualified, params.keys())
        started = time.perf_counter()
        async with self.engine.connect() as conn:
            raw = await conn.get_raw_connection()
            driver_conn = raw.driver_connection
            try:
                async with driver_conn.cursor() as cursor:
                    await cursor.execute(statement, *params.values())
                    result_sets = await read_result_sets(cursor)
                await driver_conn.commit()
            except Exception as e:
                await driver_conn.rollback()
                signal = classify_store_error(e)
                if signal is None:
                    raise
                logger.warning(
                    f"Store signal from {qualified}: {signal.message}",
                    extra={"procedure": qualified, "error_code": signal.number},
                )
                raise StoreRuleViolation(signal) from e
        logger.debug(
            f"Executed {qualified}",
            extra={
                "procedure": qualified,
                "duration_ms": round((time.perf_counter() - started) * 1000, 2),
            },
        )
        return result_sets

    async def health_check(self) -> bool:
        """Check store connectivity (for readiness probes)."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


# Singleton (created on first use)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


def get_db_manager() -> DatabaseSessionManager:
    """Return the process-wide manager, creating it from settings once."""
    if db_manager is None:
        settings = get_settings()
        init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            pool_recycle=settings.database_pool_recycle_seconds,
            procedure_schema=settings.procedure_schema,
        )
    return db_manager


async def close_db() -> None:
    global db_manager
    if db_manager is not None:
        await db_manager.dispose()
        db_manager = None


async def get_gateway() -> ProcedureGateway:
    """FastAPI dependency for stored-procedure access."""
    return get_db_manager()
