from .comment import CommentDoc
from .profile import ProfileDoc
from .task import TaskDoc, TaskStatus

__all__ = ["CommentDoc", "ProfileDoc", "TaskDoc", "TaskStatus"]
