from django.contrib.auth.password_validation import validate_password
from rest_framework import serializers

from accounts.models import User
from issues.choices import Department


class UserOutputSerializer(serializers.ModelSerializer):
    created_at = serializers.DateTimeField(source="date_joined", read_only=True)

    class Meta:
        model = User
        fields = ["id", "email", "full_name", "role", "department", "student_number", "phone", "created_at"]
        read_only_fields = fields


class UserSnapshotSerializer(serializers.ModelSerializer):
    """Lighter shape embedded in issue and comment payloads"""

    class Meta:
        model = User
        fields = ["id", "email", "full_name", "role", "department"]
        read_only_fields = fields


class RegisterSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)
    full_name = serializers.CharField(max_length=150)
    role = serializers.ChoiceField(choices=User.Role.choices, default=User.Role.STUDENT)
    department = serializers.ChoiceField(choices=Department.choices, required=False, allow_blank=True)
    student_number = serializers.CharField(max_length=32, required=False, allow_blank=True)
    phone = serializers.CharField(max_length=32, required=False, allow_blank=True)

    def validate_password(self, value):
        validate_password(value)
        return value

    def validate(self, attrs):
        if attrs.get("role") == User.Role.DEPT_STAFF and not attrs.get("department"):
            raise serializers.ValidationError({"department": "Department staff must belong to a department."})
        return attrs


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)
