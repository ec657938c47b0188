# ============================================
# issues/views/statistics.py
# ============================================
from drf_spectacular.utils import extend_schema
from rest_framework.views import APIView
from rest_framework.response import Response

from issues.permissions import IsDswAdmin
from issues.selectors.statistics import get_issue_statistics
from issues.serializers.statistics import IssueStatisticsSerializer, StatisticsFilterSerializer
from issues.views.utils import q_str, std_errors


class IssueStatisticsAPIView(APIView):
    """
    GET: Dashboard aggregates (DSW admin only)

    Query params:
    - department: string (optional)
    """
    permission_classes = [IsDswAdmin]

    @extend_schema(
        tags=["Statistics"],
        parameters=[q_str("department", "Restrict to one department")],
        responses={200: IssueStatisticsSerializer, **std_errors()},
    )
    def get(self, request):
        params = StatisticsFilterSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)

        stats = get_issue_statistics(**params.validated_data)
        return Response(IssueStatisticsSerializer(stats).data)
