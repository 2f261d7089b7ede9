from .comment import CommentService
from .profile import ProfileService
from .task_manager import TaskManager

__all__ = ["CommentService", "ProfileService", "TaskManager"]
