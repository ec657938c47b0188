from drf_spectacular.utils import extend_schema, inline_serializer
from rest_framework import serializers, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from issues.serializers.notification import NotificationSerializer
from issues.services.notification import NotificationService
from issues.selectors.notification import notifications_for_user, unread_count
from issues.views.utils import q_str, std_errors


class NotificationViewSet(viewsets.ViewSet):
    """Inbox of the signed-in user"""

    # GET /api/notifications/?unread=1
    @extend_schema(
        tags=["Notifications"],
        parameters=[q_str("unread", "1 to list unread only")],
        responses={200: NotificationSerializer(many=True)},
    )
    def list(self, request):
        unread_only = request.query_params.get("unread", "").strip().lower() in ("1", "true", "yes")
        qs = notifications_for_user(request.user.pk, unread_only=unread_only)
        return Response({
            "unread": unread_count(request.user.pk),
            "results": NotificationSerializer(qs, many=True).data,
        })

    # POST /api/notifications/{id}/read/
    @extend_schema(tags=["Notifications"], request=None, responses={200: NotificationSerializer, **std_errors()})
    @action(detail=True, methods=["post"])
    def read(self, request, pk=None):
        obj = NotificationService.mark_as_read(notification_id=pk, user=request.user)
        return Response(NotificationSerializer(obj).data)

    # POST /api/notifications/read-all/
    @extend_schema(
        tags=["Notifications"],
        request=None,
        responses={200: inline_serializer(name="MarkedRead", fields={"updated": serializers.IntegerField()})},
    )
    @action(detail=False, methods=["post"], url_path="read-all")
    def read_all(self, request):
        updated = NotificationService.mark_all_as_read(user=request.user)
        return Response({"updated": updated}, status=status.HTTP_200_OK)
