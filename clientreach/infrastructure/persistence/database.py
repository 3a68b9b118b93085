"""
SQLite Database Repository - Task Persistence
=============================================

Backs the /api/tasks resource. Tasks are addressed by their unique slug.
"""

import sqlite3
import logging
from dataclasses import dataclass
from typing import List, Optional
from contextlib import contextmanager

logger = logging.getLogger(__name__)

DATABASE_FILE = "clientreach.db"
PAGE_SIZE = 20


@dataclass
class Task:
    """Task record from database."""
    id: int
    name: str
    slug: str
    description: str = ""
    completed: bool = False
    due_date: str = ""
    created_at: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "slug": self.slug,
            "description": self.description,
            "completed": self.completed,
            "due_date": self.due_date,
        }


class Database:
    """
    SQLite database for ClientReach.

    Usage:
        db = Database()
        db.init()

        db.add_task(name="Call leads", slug="call-leads", due_date="2025-05-01T09:00:00Z")
        task = db.get_task("call-leads")
    """

    def __init__(self, db_path: str = DATABASE_FILE):
        self.db_path = str(db_path)

    @contextmanager
    def _get_connection(self):
        """Get database connection with context manager."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        finally:
            conn.close()

    def init(self):
        """Initialize database tables."""
        with self._get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS tasks (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL,
                    slug TEXT UNIQUE NOT NULL,
                    description TEXT DEFAULT '',
                    completed INTEGER DEFAULT 0,
                    due_date TEXT NOT NULL,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)

            logger.info(f"Database initialized: {self.db_path}")

    # ── Task CRUD ──────────────────────────────────────────────────

    def add_task(
        self,
        name: str,
        slug: str,
        due_date: str,
        description: str = "",
        completed: bool = False,
    ) -> Optional[Task]:
        """Add a new task. Returns None if the slug is taken."""
        try:
            with self._get_connection() as conn:
                cursor = conn.execute(
                    """INSERT INTO tasks (name, slug, description, completed, due_date)
                       VALUES (?, ?, ?, ?, ?)""",
                    (name, slug, description or "", int(completed), due_date)
                )
                task_id = cursor.lastrowid
        except sqlite3.IntegrityError:
            logger.warning(f"Task with slug {slug} already exists")
            return None
        return self.get_task_by_id(task_id)

    def list_tasks(self, page: int = 0, completed: Optional[bool] = None) -> List[Task]:
        """List tasks one page at a time, optionally filtered by completion."""
        offset = max(page, 0) * PAGE_SIZE
        with self._get_connection() as conn:
            if completed is not None:
                rows = conn.execute(
                    "SELECT * FROM tasks WHERE completed = ? ORDER BY id LIMIT ? OFFSET ?",
                    (int(completed), PAGE_SIZE, offset)
                ).fetchall()
            else:
                rows = conn.execute(
                    "SELECT * FROM tasks ORDER BY id LIMIT ? OFFSET ?",
                    (PAGE_SIZE, offset)
                ).fetchall()
            return [self._row_to_task(row) for row in rows]

    def get_task(self, slug: str) -> Optional[Task]:
        """Get task by slug."""
        with self._get_connection() as conn:
            row = conn.execute("SELECT * FROM tasks WHERE slug = ?", (slug,)).fetchone()
            return self._row_to_task(row) if row else None

    def get_task_by_id(self, task_id: int) -> Optional[Task]:
        with self._get_connection() as conn:
            row = conn.execute("SELECT * FROM tasks WHERE id = ?", (task_id,)).fetchone()
            return self._row_to_task(row) if row else None

    def delete_task(self, slug: str) -> Optional[Task]:
        """Delete a task. Returns the deleted task, or None if it did not exist."""
        with self._get_connection() as conn:
            row = conn.execute("SELECT * FROM tasks WHERE slug = ?", (slug,)).fetchone()
            if not row:
                return None
            conn.execute("DELETE FROM tasks WHERE id = ?", (row["id"],))
        logger.info(f"Deleted task {slug}")
        return self._row_to_task(row)

    def _row_to_task(self, row: sqlite3.Row) -> Task:
        """Convert database row to Task object."""
        return Task(
            id=row["id"],
            name=row["name"],
            slug=row["slug"],
            description=row["description"] or "",
            completed=bool(row["completed"]),
            due_date=row["due_date"] or "",
            created_at=row["created_at"] or ""
        )
