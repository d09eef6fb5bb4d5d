import inject

from src.setup.db_config import DatabaseSettings, get_database_settings
from src.setup.source_config import TaskSourceSettings, build_task_source
from src.tracker.domain.repositories import TaskSource, TaskStore
from src.tracker.infrastructure.sql.orm import SqlOrm
from src.tracker.infrastructure.sql.repositories import SqlTaskStore


def build_task_store(settings: DatabaseSettings | None = None) -> SqlTaskStore:
    """Create the SQL task store and make sure its tables exist."""
    if settings is None:
        settings = get_database_settings()
    orm = SqlOrm(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
    orm.create_schema()
    return SqlTaskStore(orm)


def configure_di(
    db_settings: DatabaseSettings | None = None,
    source_settings: TaskSourceSettings | None = None,
) -> None:
    """Bind the task store and task source once per process."""
    if inject.is_configured():
        return
    store = build_task_store(db_settings)
    source = build_task_source(source_settings)

    def _config(binder: inject.Binder) -> None:
        binder.bind(TaskStore, store)
        binder.bind(TaskSource, source)

    inject.configure(_config)
