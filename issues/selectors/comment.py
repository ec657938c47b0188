# ============================================
# issues/selectors/comment.py
# ============================================
from typing import Optional
from django.db.models import QuerySet
from issues.repositories.issue_repository import IssueRepository


class CommentSelector:

    @staticmethod
    def get_comments_by_issue(issue_id: int, repository: Optional[IssueRepository] = None) -> QuerySet:
        """All comments for an issue, oldest first"""
        return (repository or IssueRepository()).comments(issue_id)
