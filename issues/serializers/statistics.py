from rest_framework import serializers

from issues.choices import Department


class DepartmentStatSerializer(serializers.Serializer):
    department = serializers.CharField()
    issues = serializers.IntegerField()
    resolved = serializers.IntegerField()


class IssueStatisticsSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    pending = serializers.IntegerField()
    resolved = serializers.IntegerField()
    avg_resolution_days = serializers.IntegerField()
    by_status = serializers.DictField(child=serializers.IntegerField())
    by_department = DepartmentStatSerializer(many=True)


class StatisticsFilterSerializer(serializers.Serializer):
    department = serializers.ChoiceField(choices=Department.choices, required=False)
