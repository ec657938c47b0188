# ============================================
# issues/views/issue.py
# ============================================
from drf_spectacular.utils import extend_schema
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from accounts.models import User
from issues.pagination import IssuePagination
from issues.serializers.issue import (
    IssueAssignSerializer,
    IssueCreateSerializer,
    IssueFeedbackSerializer,
    IssueFilterSerializer,
    IssueHistoryOutputSerializer,
    IssueListOutputSerializer,
    IssueOutputSerializer,
    IssueStatusSerializer,
    TransitionOutputSerializer,
)
from issues.selectors.issue import IssueSelector
from issues.views.utils import IssueServiceMixin, path_int, q_int, q_str, std_errors


class IssueListCreateAPIView(IssueServiceMixin, APIView):
    """
    GET: List issues with filters (role-scoped)
    POST: Report a new issue (students)

    Query params (GET):
    - student_id, assigned_to: int (optional)
    - department, status, priority, category, search: string (optional)
    - page, page_size: int

    Students always get their own issues only; department staff get their
    department's issues; admins may filter freely.

    Request body (POST):
    - title: string (required, >= 5 chars)
    - description: string (required, >= 20 chars)
    - category, department: string (required, fixed lists)
    - priority: low/medium/high/urgent (default medium)
    - attachments: list of file names (optional, max 5)
    """

    @extend_schema(
        tags=["Issues"],
        parameters=[
            q_int("student_id", "Reporter user id"),
            q_str("department", "Department name"),
            q_str("status", "pending/assigned/in_progress/resolved/rejected"),
            q_int("assigned_to", "Assignee user id"),
            q_str("priority", "low/medium/high/urgent"),
            q_str("category", "Category name"),
            q_str("search", "Text in title or description"),
        ],
        responses={200: IssueListOutputSerializer(many=True)},
    )
    def get(self, request):
        filter_serializer = IssueFilterSerializer(data=request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        filters = dict(filter_serializer.validated_data)

        user = request.user
        if user.role == User.Role.STUDENT:
            filters['student_id'] = user.pk
        elif user.role == User.Role.DEPT_STAFF and user.department:
            filters['department'] = user.department

        issues = IssueSelector.get_issues_list(**filters)

        # Paginate
        paginator = IssuePagination()
        page = paginator.paginate_queryset(issues, request, view=self)

        serializer = IssueListOutputSerializer(page, many=True)
        return paginator.get_paginated_response(serializer.data)

    @extend_schema(
        tags=["Issues"],
        request=IssueCreateSerializer,
        responses={201: IssueOutputSerializer, **std_errors()},
    )
    def post(self, request):
        serializer = IssueCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().create_issue(
            actor=request.user,
            **serializer.validated_data
        )

        output_serializer = IssueOutputSerializer(result.current)
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)


class IssueDetailAPIView(IssueServiceMixin, APIView):
    """
    GET: Retrieve issue details with reporter and assignee

    Path params:
    - issue_id: int
    """

    @extend_schema(
        tags=["Issues"],
        parameters=[path_int("issue_id", "Issue ID")],
        responses={200: IssueOutputSerializer, **std_errors()},
    )
    def get(self, request, issue_id):
        issue = IssueSelector.get_issue_by_id(issue_id)
        self.check_visible(request.user, issue)

        serializer = IssueOutputSerializer(issue)
        return Response(serializer.data)


class IssueAssignAPIView(IssueServiceMixin, APIView):
    """
    POST: Assign the issue to a staff member (DSW admin only)

    Request body:
    - assignee_id: int (required)
    """

    @extend_schema(
        tags=["Issues"],
        parameters=[path_int("issue_id", "Issue ID")],
        request=IssueAssignSerializer,
        responses={200: TransitionOutputSerializer, **std_errors()},
    )
    def post(self, request, issue_id):
        serializer = IssueAssignSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().assign_issue(
            actor=request.user,
            issue_id=issue_id,
            **serializer.validated_data
        )

        return Response(TransitionOutputSerializer(result).data)


class IssueStatusAPIView(IssueServiceMixin, APIView):
    """
    POST: Change the issue status (department staff / DSW admin)

    Request body:
    - status: pending/assigned/in_progress/resolved/rejected

    The response carries the record before and after the change so a client
    that updated optimistically can roll back precisely.
    """

    @extend_schema(
        tags=["Issues"],
        parameters=[path_int("issue_id", "Issue ID")],
        request=IssueStatusSerializer,
        responses={200: TransitionOutputSerializer, **std_errors(400, 403, 404, 409)},
    )
    def post(self, request, issue_id):
        serializer = IssueStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.check_visible(request.user, IssueSelector.get_issue_by_id(issue_id))

        result = self.get_service().update_status(
            actor=request.user,
            issue_id=issue_id,
            **serializer.validated_data
        )

        return Response(TransitionOutputSerializer(result).data)


class IssueFeedbackAPIView(IssueServiceMixin, APIView):
    """
    POST: Rate a resolved issue (reporting student only)

    Request body:
    - rating: int 1-5 (required)
    - feedback: string (optional)
    """

    @extend_schema(
        tags=["Issues"],
        parameters=[path_int("issue_id", "Issue ID")],
        request=IssueFeedbackSerializer,
        responses={200: TransitionOutputSerializer, **std_errors()},
    )
    def post(self, request, issue_id):
        serializer = IssueFeedbackSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().submit_feedback(
            actor=request.user,
            issue_id=issue_id,
            **serializer.validated_data
        )

        return Response(TransitionOutputSerializer(result).data)


class IssueHistoryAPIView(IssueServiceMixin, APIView):
    """
    GET: Lifecycle log of the issue, newest first
    """

    @extend_schema(
        tags=["Issues"],
        parameters=[path_int("issue_id", "Issue ID")],
        responses={200: IssueHistoryOutputSerializer(many=True), **std_errors()},
    )
    def get(self, request, issue_id):
        issue = IssueSelector.get_issue_by_id(issue_id)
        self.check_visible(request.user, issue)

        history = IssueSelector.get_issue_history(issue.id)
        return Response(IssueHistoryOutputSerializer(history, many=True).data)
