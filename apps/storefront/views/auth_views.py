"""
Login, logout and registration endpoints.
"""
from rest_framework import status
from rest_framework.views import APIView

from apps.common.utils import success_response
from ..serializers import LoginSerializer, RegistrationSerializer
from ..services import StorefrontService
from ..session import current_identity, set_identity


class LoginView(APIView):
    """Password login - POST /api/login/"""
    serializer_class = LoginSerializer

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        identity = StorefrontService().login(
            serializer.validated_data.get('username'),
            serializer.validated_data.get('password')
        )
        set_identity(request, identity)
        return success_response({'username': identity, 'redirect': '/products'}, 'Login successful')


class LogoutView(APIView):
    """Logout - GET or POST /api/logout/"""

    def get(self, request):
        set_identity(request, StorefrontService().logout(current_identity(request)))
        return success_response({'redirect': '/index.html'}, 'Logged out')

    def post(self, request):
        return self.get(request)


class RegisterView(APIView):
    """User registration - POST /api/register/"""
    serializer_class = RegistrationSerializer

    def post(self, request):
        serializer = RegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        identity = StorefrontService().register(
            data.get('username'), data.get('email'), data.get('password')
        )
        set_identity(request, identity)
        return success_response(
            {'username': identity, 'redirect': '/products'},
            'Registration successful',
            status_code=status.HTTP_201_CREATED
        )
