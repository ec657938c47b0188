# ============================================
# issues/urls.py
# ============================================
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from issues.views.issue import (
    IssueListCreateAPIView,
    IssueDetailAPIView,
    IssueAssignAPIView,
    IssueStatusAPIView,
    IssueFeedbackAPIView,
    IssueHistoryAPIView,
)
from issues.views.comment import CommentListCreateAPIView
from issues.views.notification import NotificationViewSet
from issues.views.statistics import IssueStatisticsAPIView

app_name = 'issues'

router = DefaultRouter()
router.register(r'notifications', NotificationViewSet, basename='notifications')

urlpatterns = [
    # Issues
    path('issues/', IssueListCreateAPIView.as_view(), name='issue-list-create'),
    path('issues/statistics/', IssueStatisticsAPIView.as_view(), name='issue-statistics'),
    path('issues/<int:issue_id>/', IssueDetailAPIView.as_view(), name='issue-detail'),
    path('issues/<int:issue_id>/assign/', IssueAssignAPIView.as_view(), name='issue-assign'),
    path('issues/<int:issue_id>/status/', IssueStatusAPIView.as_view(), name='issue-status'),
    path('issues/<int:issue_id>/feedback/', IssueFeedbackAPIView.as_view(), name='issue-feedback'),
    path('issues/<int:issue_id>/history/', IssueHistoryAPIView.as_view(), name='issue-history'),

    # Comments
    path('issues/<int:issue_id>/comments/', CommentListCreateAPIView.as_view(), name='comment-list-create'),

    # Notifications
    path('', include(router.urls)),
]
