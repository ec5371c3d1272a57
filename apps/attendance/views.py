from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsApprovedAdmin, IsApprovedUser
from apps.common.exceptions import AinaBucksServiceError
from apps.common.responses import error_response, success_response

from .serializers import (
    AttendanceRosterSerializer,
    AttendanceSerializer,
    AwardResultSerializer,
    AwardSerializer,
    CheckOutResultSerializer,
    TokenSerializer,
)
from .services import (
    award_aina_bucks,
    check_in,
    check_out,
    close_out_event,
    get_attendance_summary,
    get_event_attendance,
)


# =============================================================================
# Volunteer QR scans
# =============================================================================

@extend_schema(request=TokenSerializer, responses={201: AttendanceSerializer}, tags=['attendance'])
@api_view(['POST'])
@permission_classes([IsApprovedUser])
def check_in_view(request, event_id):
    """Check in with the token from the event's check-in QR code."""
    serializer = TokenSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        attendance = check_in(
            event_id=event_id,
            token=serializer.validated_data['token'],
            user=request.user,
        )
    except AinaBucksServiceError as e:
        return error_response(e)

    return success_response(AttendanceSerializer(attendance).data, status.HTTP_201_CREATED)


@extend_schema(request=TokenSerializer, responses={200: CheckOutResultSerializer}, tags=['attendance'])
@api_view(['POST'])
@permission_classes([IsApprovedUser])
def check_out_view(request, event_id):
    """Check out with the token from the event's check-out QR code."""
    serializer = TokenSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        result = check_out(
            event_id=event_id,
            token=serializer.validated_data['token'],
            user=request.user,
        )
    except AinaBucksServiceError as e:
        return error_response(e)

    return success_response(CheckOutResultSerializer({
        'attendance_id': result['attendance'].id,
        'check_in_time': result['check_in_time'],
        'check_out_time': result['check_out_time'],
        'hours_estimate': result['hours_estimate'],
    }).data)


# =============================================================================
# Admin
# =============================================================================

@extend_schema(responses={200: AttendanceRosterSerializer(many=True)}, tags=['attendance'])
@api_view(['GET'])
@permission_classes([IsApprovedAdmin])
def event_attendance(request, event_id):
    try:
        records = get_event_attendance(event_id)
    except AinaBucksServiceError as e:
        return error_response(e)

    return success_response(AttendanceRosterSerializer(records, many=True).data)


@extend_schema(tags=['attendance'])
@api_view(['GET'])
@permission_classes([IsApprovedAdmin])
def attendance_summary(request, event_id):
    try:
        summary = get_attendance_summary(event_id)
    except AinaBucksServiceError as e:
        return error_response(e)

    return success_response(summary)


@extend_schema(request=None, tags=['attendance'])
@api_view(['POST'])
@permission_classes([IsApprovedAdmin])
def close_out(request, event_id):
    """Mark open check-ins INCOMPLETE and registered no-shows NO_SHOW."""
    try:
        result = close_out_event(event_id=event_id, actor=request.user)
    except AinaBucksServiceError as e:
        return error_response(e)

    return success_response(result)


@extend_schema(request=AwardSerializer, responses={200: AwardResultSerializer}, tags=['attendance'])
@api_view(['POST'])
@permission_classes([IsApprovedAdmin])
def award(request, attendance_id):
    """Award ʻĀina Bucks for approved hours."""
    serializer = AwardSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        result = award_aina_bucks(
            attendance_id=attendance_id,
            hours_worked=serializer.validated_data['hours_worked'],
            actor=request.user,
            admin_notes=serializer.validated_data['admin_notes'],
        )
    except AinaBucksServiceError as e:
        return error_response(e)

    return success_response(AwardResultSerializer(result).data)
