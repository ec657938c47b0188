from rest_framework import serializers
from issues.models import Notification


class NotificationSerializer(serializers.ModelSerializer):
    user_id = serializers.IntegerField(read_only=True)
    issue_id = serializers.IntegerField(read_only=True, allow_null=True)

    class Meta:
        model = Notification
        fields = ["id", "user_id", "issue_id", "title", "message", "read", "created_at"]
        read_only_fields = fields
