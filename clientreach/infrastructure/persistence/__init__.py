from .database import Database, Task

__all__ = ["Database", "Task"]
