# ============================================
# issues/serializers/issue.py
# ============================================
from rest_framework import serializers

from accounts.serializers import UserSnapshotSerializer
from issues.choices import (
    Category, Department, Priority, Status,
    DESCRIPTION_MIN_LENGTH, MAX_ATTACHMENTS, TITLE_MIN_LENGTH,
)
from issues.models import Issue, IssueHistory


class IssueCreateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255, min_length=TITLE_MIN_LENGTH, trim_whitespace=False)
    description = serializers.CharField(min_length=DESCRIPTION_MIN_LENGTH, trim_whitespace=False)
    category = serializers.ChoiceField(choices=Category.choices)
    department = serializers.ChoiceField(choices=Department.choices)
    priority = serializers.ChoiceField(
        choices=Priority.choices,
        default=Priority.MEDIUM
    )
    attachments = serializers.ListField(
        child=serializers.CharField(max_length=255),
        required=False,
        default=list,
        max_length=MAX_ATTACHMENTS
    )


class IssueFilterSerializer(serializers.Serializer):
    student_id = serializers.IntegerField(required=False)
    department = serializers.ChoiceField(choices=Department.choices, required=False)
    status = serializers.ChoiceField(choices=Status.choices, required=False)
    assigned_to = serializers.IntegerField(required=False)
    priority = serializers.ChoiceField(choices=Priority.choices, required=False)
    category = serializers.ChoiceField(choices=Category.choices, required=False)
    search = serializers.CharField(required=False, allow_blank=True)


class IssueAssignSerializer(serializers.Serializer):
    assignee_id = serializers.IntegerField()


class IssueStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Status.choices)


class IssueFeedbackSerializer(serializers.Serializer):
    rating = serializers.IntegerField(min_value=1, max_value=5)
    feedback = serializers.CharField(required=False, allow_blank=True, default='')


class IssueOutputSerializer(serializers.ModelSerializer):
    student = UserSnapshotSerializer(read_only=True)
    assigned_user = UserSnapshotSerializer(source='assigned_to', read_only=True)
    student_id = serializers.IntegerField(read_only=True)
    assigned_to = serializers.IntegerField(source='assigned_to_id', read_only=True)

    class Meta:
        model = Issue
        fields = [
            'id', 'title', 'description', 'category', 'department',
            'priority', 'status', 'student_id', 'student',
            'assigned_to', 'assigned_user', 'attachments',
            'feedback', 'rating',
            'created_at', 'updated_at', 'resolved_at'
        ]
        read_only_fields = fields


class IssueListOutputSerializer(serializers.ModelSerializer):
    """Lighter serializer for list views: no description, attachments or feedback"""
    student = UserSnapshotSerializer(read_only=True)
    assigned_user = UserSnapshotSerializer(source='assigned_to', read_only=True)
    student_id = serializers.IntegerField(read_only=True)
    assigned_to = serializers.IntegerField(source='assigned_to_id', read_only=True)

    class Meta:
        model = Issue
        fields = [
            'id', 'title', 'category', 'department', 'priority',
            'status', 'student_id', 'student', 'assigned_to', 'assigned_user',
            'created_at', 'updated_at', 'resolved_at'
        ]


class TransitionOutputSerializer(serializers.Serializer):
    """Result of a mutating call: the record before and after"""
    previous = IssueOutputSerializer(allow_null=True)
    issue = IssueOutputSerializer(source='current')
    changed = serializers.ListField(child=serializers.CharField())


class IssueHistoryOutputSerializer(serializers.ModelSerializer):
    actor = UserSnapshotSerializer(read_only=True)

    class Meta:
        model = IssueHistory
        fields = ['id', 'field_name', 'old_value', 'new_value', 'actor', 'created_at']
