# ============================================
# issues/models/__init__.py
# ============================================
from .issue import Issue
from .comment import Comment
from .history import IssueHistory
from .notification import Notification

__all__ = [
    'Issue',
    'Comment',
    'IssueHistory',
    'Notification',
]
