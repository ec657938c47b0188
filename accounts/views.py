from drf_spectacular.utils import extend_schema, OpenApiResponse, inline_serializer
from rest_framework import permissions, serializers, status
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.serializers import LoginSerializer, RegisterSerializer, UserOutputSerializer
from accounts.services import login_user, register_user

TokenSerializer = inline_serializer(
    name="AuthToken",
    fields={"token": serializers.CharField(), "user": UserOutputSerializer()},
)


class RegisterAPIView(APIView):
    """
    POST: Register a new user

    Request body:
    - email, password, full_name (required)
    - role: student | dsw_admin | dept_staff (default student)
    - department, student_number, phone (optional)
    """
    permission_classes = [permissions.AllowAny]

    @extend_schema(
        tags=["Auth"],
        request=RegisterSerializer,
        responses={201: UserOutputSerializer, 400: OpenApiResponse(description="Bad Request")},
    )
    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = register_user(**serializer.validated_data)
        return Response(UserOutputSerializer(user).data, status=status.HTTP_201_CREATED)


class LoginAPIView(APIView):
    """
    POST: Exchange email/password for an API token
    """
    permission_classes = [permissions.AllowAny]

    @extend_schema(
        tags=["Auth"],
        request=LoginSerializer,
        responses={200: TokenSerializer, 400: OpenApiResponse(description="Invalid credentials")},
    )
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user, token = login_user(request=request, **serializer.validated_data)
        return Response({"token": token.key, "user": UserOutputSerializer(user).data})


class MeAPIView(APIView):
    @extend_schema(tags=["Auth"], responses={200: UserOutputSerializer})
    def get(self, request):
        return Response(UserOutputSerializer(request.user).data)
