from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes, throttle_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken
from drf_spectacular.utils import extend_schema, inline_serializer

from apps.common.exceptions import AinaBucksServiceError, InvalidInputError
from apps.common.responses import StandardPagination, error_response, success_response

from .permissions import IsApprovedAdmin, IsApprovedUser
from .serializers import (
    SessionSerializer,
    UpdateRoleSerializer,
    UpdateStatusSerializer,
    UserLoginSerializer,
    UserRegistrationSerializer,
    UserSerializer,
)
from .services import (
    approve_account,
    authenticate_user,
    build_session,
    delete_user,
    get_all_users,
    get_pending_users,
    get_profile_summary,
    register_user,
    reject_account,
    update_user_role,
    update_user_status,
)
from .throttles import AuthRateThrottle


# Response serializers for API documentation
class TokensResponseSerializer(serializers.Serializer):
    refresh = serializers.CharField()
    access = serializers.CharField()


class AuthResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    data = inline_serializer(
        name='AuthData',
        fields={
            'session': SessionSerializer(),
            'tokens': TokensResponseSerializer(),
        },
    )


class ErrorResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    error = serializers.CharField()
    code = serializers.CharField()


class LogoutRequestSerializer(serializers.Serializer):
    refresh = serializers.CharField(help_text="Refresh token of the session", required=False)


def _issue_tokens(user):
    """JWT pair carrying the session claims (name, email, role, status)."""
    refresh = RefreshToken.for_user(user)
    for claim, value in build_session(user).items():
        if claim != 'user_id':
            refresh[claim] = value

    return {
        'refresh': str(refresh),
        'access': str(refresh.access_token),
    }


def _auth_payload(user):
    return {
        'session': build_session(user),
        'tokens': _issue_tokens(user),
    }


# =============================================================================
# Sign-up / sign-in
# =============================================================================

@extend_schema(
    request=UserRegistrationSerializer,
    responses={
        201: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        429: ErrorResponseSerializer,
    },
    description="Create a volunteer account (PENDING until approved) and sign in.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
@throttle_classes([AuthRateThrottle])
def register(request):
    """Register a new volunteer account."""
    serializer = UserRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    data = serializer.validated_data.copy()
    data.pop('confirm_password', None)

    try:
        user = register_user(**data)
    except AinaBucksServiceError as e:
        return error_response(e)

    return success_response(_auth_payload(user), status.HTTP_201_CREATED)


@extend_schema(
    request=UserLoginSerializer,
    responses={
        200: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
        429: ErrorResponseSerializer,
    },
    description="Authenticate with email and password to receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
@throttle_classes([AuthRateThrottle])
def login(request):
    """Login with email and password."""
    serializer = UserLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = authenticate_user(**serializer.validated_data)
    except AinaBucksServiceError as e:
        return error_response(e)

    return success_response(_auth_payload(user))


@extend_schema(
    request=LogoutRequestSerializer,
    responses={200: None, 400: ErrorResponseSerializer},
    description="End the session. Tokens are stateless, clients drop them.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def logout(request):
    """Logout, validating the refresh token when one is sent."""
    refresh_token = request.data.get('refresh')
    if refresh_token:
        try:
            RefreshToken(refresh_token)
        except TokenError:
            return error_response(InvalidInputError('Invalid token'))

    return success_response({'message': 'Logout successful'})


@extend_schema(
    responses={200: SessionSerializer},
    description="Current session: user id, name, email, role and approval status.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def session(request):
    return success_response(build_session(request.user))


@extend_schema(
    responses={200: None, 403: ErrorResponseSerializer},
    description="Profile with balances, upcoming events and recent ledger activity.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsApprovedUser])
def profile(request):
    return success_response(get_profile_summary(request.user))


# =============================================================================
# Account administration
# =============================================================================

def _paginate_users(request, queryset):
    paginator = StandardPagination()
    page = paginator.paginate_queryset(queryset, request)
    return paginator.get_paginated_response(UserSerializer(page, many=True).data)


@extend_schema(
    responses={200: UserSerializer(many=True)},
    description="All users, newest first (admin only).",
    tags=['users'],
)
@api_view(['GET'])
@permission_classes([IsApprovedAdmin])
def user_list(request):
    return _paginate_users(request, get_all_users())


@extend_schema(
    responses={200: UserSerializer(many=True)},
    description="Accounts awaiting approval, oldest first (admin only).",
    tags=['users'],
)
@api_view(['GET'])
@permission_classes([IsApprovedAdmin])
def pending_users(request):
    return _paginate_users(request, get_pending_users())


@extend_schema(
    request=None,
    responses={200: UserSerializer, 404: ErrorResponseSerializer, 409: ErrorResponseSerializer},
    description="Approve a pending account request.",
    tags=['users'],
)
@api_view(['POST'])
@permission_classes([IsApprovedAdmin])
def approve_user(request, user_id):
    try:
        user = approve_account(user_id=user_id, actor=request.user)
    except AinaBucksServiceError as e:
        return error_response(e)

    return success_response(UserSerializer(user).data)


@extend_schema(
    request=None,
    responses={200: UserSerializer, 404: ErrorResponseSerializer, 409: ErrorResponseSerializer},
    description="Reject a pending account request.",
    tags=['users'],
)
@api_view(['POST'])
@permission_classes([IsApprovedAdmin])
def reject_user(request, user_id):
    try:
        user = reject_account(user_id=user_id, actor=request.user)
    except AinaBucksServiceError as e:
        return error_response(e)

    return success_response(UserSerializer(user).data)


@extend_schema(
    request=UpdateRoleSerializer,
    responses={200: UserSerializer, 400: ErrorResponseSerializer, 404: ErrorResponseSerializer},
    description="Change a user's role (USER / ADMIN).",
    tags=['users'],
)
@api_view(['PATCH'])
@permission_classes([IsApprovedAdmin])
def change_role(request, user_id):
    serializer = UpdateRoleSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = update_user_role(
            user_id=user_id,
            role=serializer.validated_data['role'],
            actor=request.user,
        )
    except AinaBucksServiceError as e:
        return error_response(e)

    return success_response(UserSerializer(user).data)


@extend_schema(
    request=UpdateStatusSerializer,
    responses={200: UserSerializer, 400: ErrorResponseSerializer, 404: ErrorResponseSerializer},
    description="Set a user's approval status.",
    tags=['users'],
)
@api_view(['PATCH'])
@permission_classes([IsApprovedAdmin])
def change_status(request, user_id):
    serializer = UpdateStatusSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = update_user_status(
            user_id=user_id,
            status=serializer.validated_data['status'],
            actor=request.user,
        )
    except AinaBucksServiceError as e:
        return error_response(e)

    return success_response(UserSerializer(user).data)


@extend_schema(
    responses={200: None, 404: ErrorResponseSerializer},
    description="Delete a user and everything they own.",
    tags=['users'],
)
@api_view(['DELETE'])
@permission_classes([IsApprovedAdmin])
def remove_user(request, user_id):
    try:
        delete_user(user_id=user_id, actor=request.user)
    except AinaBucksServiceError as e:
        return error_response(e)

    return success_response({'id': str(user_id)})
