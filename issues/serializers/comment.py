# ============================================
# issues/serializers/comment.py
# ============================================
from rest_framework import serializers

from accounts.serializers import UserSnapshotSerializer
from issues.models import Comment


class CommentCreateSerializer(serializers.Serializer):
    content = serializers.CharField()


class CommentOutputSerializer(serializers.ModelSerializer):
    issue_id = serializers.IntegerField(read_only=True)
    user_id = serializers.IntegerField(source='author_id', read_only=True)
    user = UserSnapshotSerializer(source='author', read_only=True)

    class Meta:
        model = Comment
        fields = ['id', 'issue_id', 'user_id', 'user', 'content', 'created_at']
