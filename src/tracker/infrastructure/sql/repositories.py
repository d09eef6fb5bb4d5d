from __future__ import annotations

from datetime import UTC, datetime
from uuid import uuid4

from sqlalchemy import select

from src.tracker.domain.models.task import Task
from src.tracker.domain.repositories import TaskStore
from src.tracker.infrastructure.sql.mappers import OrmMapper
from src.tracker.infrastructure.sql.orm import SqlOrm, TaskRow


class SqlTaskStore(TaskStore):
    """SQL-backed task store using SQLAlchemy sessions."""

    def __init__(self, orm: SqlOrm) -> None:
        self._orm = orm

    def find_by_id(self, task_id: str) -> Task | None:
        with self._orm.session_factory() as session:
            row = session.get(TaskRow, task_id)
            if row is None:
                return None
            return OrmMapper.to_domain_task(row)

    def save(self, task: Task) -> Task:
        """Insert a new task or overwrite the stored state of an existing one."""
        now = datetime.now(UTC)
        with self._orm.session_factory() as session:
            with session.begin():
                row = session.get(TaskRow, task.id) if task.id is not None else None
                if row is None:
                    stored = task.model_copy(
                        update={
                            "id": task.id or uuid4().hex,
                            "created_at": now,
                            "updated_at": now,
                        }
                    )
                    row = OrmMapper.to_task_row(stored)
                    session.add(row)
                else:
                    # created_at belongs to the row and survives every update.
                    stored = task.model_copy(
                        update={"created_at": row.created_at, "updated_at": now}
                    )
                    OrmMapper.apply_to_row(row, stored)
            return OrmMapper.to_domain_task(row)

    def delete_by_id(self, task_id: str) -> bool:
        with self._orm.session_factory() as session:
            with session.begin():
                row = session.get(TaskRow, task_id)
                if row is None:
                    return False
                session.delete(row)
        return True

    def find_all(self) -> list[Task]:
        with self._orm.session_factory() as session:
            rows = session.execute(select(TaskRow).order_by(TaskRow.created_at)).scalars().all()
            return [OrmMapper.to_domain_task(row) for row in rows]

    def find_by_owner(self, user_id: str) -> list[Task]:
        statement = (
            select(TaskRow).where(TaskRow.user_id == user_id).order_by(TaskRow.created_at)
        )
        with self._orm.session_factory() as session:
            rows = session.execute(statement).scalars().all()
            return [OrmMapper.to_domain_task(row) for row in rows]
