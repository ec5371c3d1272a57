from uuid import UUID

from rest_framework import viewsets, status
from rest_framework.decorators import action
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.accounts.permissions import IsApprovedAdmin, IsApprovedUser
from apps.common.exceptions import AinaBucksServiceError
from apps.common.responses import error_response, success_response
from apps.registrations.services import is_user_registered

from .models import Event
from .serializers import EventSerializer, EventWriteSerializer, EventQRCodesSerializer
from .services import (
    create_event,
    update_event,
    delete_event,
    get_event,
    get_event_catalog,
    get_event_categories,
    get_event_detail,
    get_event_qr_codes,
)


class EventViewSet(viewsets.GenericViewSet):
    """
    Event catalog and administration.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: Catalog with live registration counts (search, category filters)
    retrieve: Event detail, with the caller's registration state
    create / update / partial_update / destroy: Admin only
    qr_codes: Check-in and check-out QR codes (admin only)
    """

    queryset = Event.objects.all()
    serializer_class = EventSerializer
    lookup_value_regex = '[0-9a-fA-F-]{36}'

    def get_permissions(self):
        """Volunteers read, admins write."""
        if self.action in ['list', 'retrieve', 'categories']:
            return [IsApprovedUser()]
        return [IsApprovedAdmin()]

    def get_serializer_class(self):
        if self.action in ['create', 'update', 'partial_update']:
            return EventWriteSerializer
        return EventSerializer

    @extend_schema(
        parameters=[
            OpenApiParameter('search', str, description='Match title, description, location or city'),
            OpenApiParameter('category', str, description='Exact category'),
        ],
        tags=['events'],
    )
    def list(self, request):
        events = get_event_catalog(
            search=request.query_params.get('search') or None,
            category=request.query_params.get('category') or None,
        )
        page = self.paginate_queryset(events)
        return self.get_paginated_response(EventSerializer(page, many=True).data)

    @extend_schema(tags=['events'])
    def retrieve(self, request, pk=None):
        try:
            event = get_event_detail(UUID(pk))
        except AinaBucksServiceError as e:
            return error_response(e)

        data = EventSerializer(event).data
        data['is_registered'] = is_user_registered(request.user.id, event.id)
        return success_response(data)

    @extend_schema(request=EventWriteSerializer, responses={201: EventSerializer}, tags=['events'])
    def create(self, request):
        serializer = EventWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            event = create_event(actor=request.user, **serializer.validated_data)
        except AinaBucksServiceError as e:
            return error_response(e)

        return success_response(EventSerializer(event).data, status.HTTP_201_CREATED)

    def _update(self, request, pk, partial):
        serializer = EventWriteSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            event = update_event(event_id=UUID(pk), actor=request.user, **serializer.validated_data)
        except AinaBucksServiceError as e:
            return error_response(e)

        return success_response(EventSerializer(event).data)

    @extend_schema(request=EventWriteSerializer, responses={200: EventSerializer}, tags=['events'])
    def update(self, request, pk=None):
        return self._update(request, pk, partial=False)

    @extend_schema(request=EventWriteSerializer, responses={200: EventSerializer}, tags=['events'])
    def partial_update(self, request, pk=None):
        return self._update(request, pk, partial=True)

    @extend_schema(tags=['events'])
    def destroy(self, request, pk=None):
        try:
            delete_event(event_id=UUID(pk), actor=request.user)
        except AinaBucksServiceError as e:
            return error_response(e)

        return success_response({'id': pk})

    @extend_schema(responses={200: EventQRCodesSerializer}, tags=['events'])
    @action(detail=True, methods=['get'], url_path='qr-codes')
    def qr_codes(self, request, pk=None):
        """Check-in / check-out links and QR images (admin only)."""
        try:
            event = get_event(UUID(pk))
        except AinaBucksServiceError as e:
            return error_response(e)

        return success_response(get_event_qr_codes(event))

    @extend_schema(tags=['events'])
    @action(detail=False, methods=['get'])
    def categories(self, request):
        return success_response(get_event_categories())
