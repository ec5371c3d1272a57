from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsApprovedAdmin, IsApprovedUser
from apps.common.exceptions import AinaBucksServiceError
from apps.common.responses import error_response, success_response

from .serializers import RegistrationSerializer, RosterEntrySerializer, UpcomingEventSerializer
from .services import (
    cancel_registration,
    get_event_registrations,
    get_user_upcoming_events,
    is_user_registered,
    mark_no_shows,
    register_for_event,
)


@extend_schema(request=None, responses={201: RegistrationSerializer}, tags=['registrations'])
@api_view(['POST'])
@permission_classes([IsApprovedUser])
def register(request, event_id):
    """Register for an event."""
    try:
        registration = register_for_event(event_id=event_id, user=request.user)
    except AinaBucksServiceError as e:
        return error_response(e)

    return success_response(RegistrationSerializer(registration).data, status.HTTP_201_CREATED)


@extend_schema(request=None, tags=['registrations'])
@api_view(['POST'])
@permission_classes([IsApprovedUser])
def cancel(request, event_id):
    """Cancel the caller's registration. Succeeds even when there is none."""
    try:
        cancelled = cancel_registration(event_id=event_id, user=request.user)
    except AinaBucksServiceError as e:
        return error_response(e)

    return success_response({'cancelled': cancelled})


@extend_schema(tags=['registrations'])
@api_view(['GET'])
@permission_classes([IsApprovedUser])
def registration_status(request, event_id):
    return success_response({'is_registered': is_user_registered(request.user.id, event_id)})


@extend_schema(responses={200: UpcomingEventSerializer(many=True)}, tags=['registrations'])
@api_view(['GET'])
@permission_classes([IsApprovedUser])
def my_upcoming(request):
    """Events the caller is registered for, soonest first."""
    registrations = get_user_upcoming_events(request.user.id)
    return success_response(UpcomingEventSerializer(registrations, many=True).data)


@extend_schema(responses={200: RosterEntrySerializer(many=True)}, tags=['registrations'])
@api_view(['GET'])
@permission_classes([IsApprovedAdmin])
def roster(request, event_id):
    """Active registrations of an event, in sign-up order (admin only)."""
    registrations = get_event_registrations(event_id)
    return success_response(RosterEntrySerializer(registrations, many=True).data)


@extend_schema(request=None, tags=['registrations'])
@api_view(['POST'])
@permission_classes([IsApprovedAdmin])
def no_shows(request, event_id):
    """Mark registered volunteers who never checked in as no-shows (admin only)."""
    try:
        marked = mark_no_shows(event_id=event_id, actor=request.user)
    except AinaBucksServiceError as e:
        return error_response(e)

    return success_response({'marked': marked})
