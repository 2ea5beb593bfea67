# ============================================
# tracker/models/__init__.py
# ============================================
from .user import User
from .project import Project
from .tag import Tag
from .task import Task

__all__ = [
    'User',
    'Project',
    'Tag',
    'Task',
]
