# ============================================
# issues/views/comment.py
# ============================================
from drf_spectacular.utils import extend_schema
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from issues.serializers.comment import (
    CommentCreateSerializer,
    CommentOutputSerializer
)
from issues.selectors.comment import CommentSelector
from issues.selectors.issue import IssueSelector
from issues.views.utils import IssueServiceMixin, path_int, std_errors


class CommentListCreateAPIView(IssueServiceMixin, APIView):
    """
    GET: List comments for an issue, oldest first
    POST: Create a comment

    Path params:
    - issue_id: int

    Request body (POST):
    - content: string (required, not blank)
    """

    @extend_schema(
        tags=["Comments"],
        parameters=[path_int("issue_id", "Issue ID")],
        responses={200: CommentOutputSerializer(many=True), **std_errors()},
    )
    def get(self, request, issue_id):
        issue = IssueSelector.get_issue_by_id(issue_id)
        self.check_visible(request.user, issue)

        comments = CommentSelector.get_comments_by_issue(issue.id)
        serializer = CommentOutputSerializer(comments, many=True)
        return Response(serializer.data)

    @extend_schema(
        tags=["Comments"],
        parameters=[path_int("issue_id", "Issue ID")],
        request=CommentCreateSerializer,
        responses={201: CommentOutputSerializer, **std_errors()},
    )
    def post(self, request, issue_id):
        serializer = CommentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.check_visible(request.user, IssueSelector.get_issue_by_id(issue_id))

        comment = self.get_service().add_comment(
            actor=request.user,
            issue_id=issue_id,
            **serializer.validated_data
        )

        output_serializer = CommentOutputSerializer(comment)
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)
