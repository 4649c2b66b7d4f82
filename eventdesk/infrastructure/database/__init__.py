from .async_db import (
    AsyncSessionFactory,
    build_engine,
    check_database_health,
    create_db_and_tables,
    dispose_engine,
    engine,
    run_probe_query,
)

__all__ = [
    "engine",
    "AsyncSessionFactory",
    "build_engine",
    "create_db_and_tables",
    "check_database_health",
    "run_probe_query",
    "dispose_engine",
]
