from uuid import UUID

from rest_framework import viewsets, status
from rest_framework.decorators import action, api_view, permission_classes
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.accounts.permissions import IsApprovedAdmin, IsApprovedUser
from apps.common.exceptions import AinaBucksServiceError
from apps.common.responses import error_response, success_response

from .models import Reward
from .serializers import (
    FulfillSerializer,
    RedeemSerializer,
    RedemptionSerializer,
    RewardSerializer,
    RewardWriteSerializer,
)
from .services import (
    RewardNotFoundError,
    create_reward,
    delete_reward,
    fulfill_redemption,
    get_active_rewards,
    get_all_rewards,
    get_pending_redemptions,
    get_user_redemptions,
    redeem_reward,
    update_reward,
)


class RewardViewSet(viewsets.GenericViewSet):
    """
    Reward catalog, redemption and administration.

    list: Active rewards (admins may pass ?all=true)
    retrieve: Reward detail
    create / update / partial_update / destroy: Admin only
    redeem: Spend ʻĀina Bucks on a reward
    my_redemptions: Caller's redemption history
    pending_redemptions: Redemptions waiting to be handed out (admin only)
    """

    queryset = Reward.objects.all()
    serializer_class = RewardSerializer
    lookup_value_regex = '[0-9a-fA-F-]{36}'

    def get_permissions(self):
        """Volunteers browse and redeem, admins manage."""
        if self.action in ['list', 'retrieve', 'redeem', 'my_redemptions']:
            return [IsApprovedUser()]
        return [IsApprovedAdmin()]

    def get_serializer_class(self):
        if self.action in ['create', 'update', 'partial_update']:
            return RewardWriteSerializer
        return RewardSerializer

    @extend_schema(
        parameters=[OpenApiParameter('all', bool, description='Include inactive and archived (admin)')],
        tags=['rewards'],
    )
    def list(self, request):
        show_all = request.query_params.get('all') == 'true' and request.user.is_admin
        rewards = get_all_rewards() if show_all else get_active_rewards()

        page = self.paginate_queryset(rewards)
        return self.get_paginated_response(RewardSerializer(page, many=True).data)

    @extend_schema(tags=['rewards'])
    def retrieve(self, request, pk=None):
        reward = Reward.objects.filter(id=UUID(pk)).first()
        if reward is None:
            return error_response(RewardNotFoundError())
        return success_response(RewardSerializer(reward).data)

    @extend_schema(request=RewardWriteSerializer, responses={201: RewardSerializer}, tags=['rewards'])
    def create(self, request):
        serializer = RewardWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            reward = create_reward(actor=request.user, **serializer.validated_data)
        except AinaBucksServiceError as e:
            return error_response(e)

        return success_response(RewardSerializer(reward).data, status.HTTP_201_CREATED)

    def _update(self, request, pk, partial):
        serializer = RewardWriteSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            reward = update_reward(reward_id=UUID(pk), actor=request.user, **serializer.validated_data)
        except AinaBucksServiceError as e:
            return error_response(e)

        return success_response(RewardSerializer(reward).data)

    @extend_schema(request=RewardWriteSerializer, responses={200: RewardSerializer}, tags=['rewards'])
    def update(self, request, pk=None):
        return self._update(request, pk, partial=False)

    @extend_schema(request=RewardWriteSerializer, responses={200: RewardSerializer}, tags=['rewards'])
    def partial_update(self, request, pk=None):
        return self._update(request, pk, partial=True)

    @extend_schema(tags=['rewards'])
    def destroy(self, request, pk=None):
        """Delete a reward, or archive it when it has redemptions."""
        try:
            deleted = delete_reward(reward_id=UUID(pk), actor=request.user)
        except AinaBucksServiceError as e:
            return error_response(e)

        return success_response({'id': pk, 'deleted': deleted, 'archived': not deleted})

    @extend_schema(request=RedeemSerializer, responses={201: RedemptionSerializer}, tags=['rewards'])
    @action(detail=True, methods=['post'])
    def redeem(self, request, pk=None):
        serializer = RedeemSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            redemption = redeem_reward(
                user=request.user,
                reward_id=UUID(pk),
                quantity=serializer.validated_data['quantity'],
            )
        except AinaBucksServiceError as e:
            return error_response(e)

        return success_response(RedemptionSerializer(redemption).data, status.HTTP_201_CREATED)

    @extend_schema(responses={200: RedemptionSerializer(many=True)}, tags=['rewards'])
    @action(detail=False, methods=['get'], url_path='redemptions/my')
    def my_redemptions(self, request):
        redemptions = get_user_redemptions(request.user.id)
        return success_response(RedemptionSerializer(redemptions, many=True).data)

    @extend_schema(responses={200: RedemptionSerializer(many=True)}, tags=['rewards'])
    @action(detail=False, methods=['get'], url_path='redemptions/pending')
    def pending_redemptions(self, request):
        page = self.paginate_queryset(get_pending_redemptions())
        return self.get_paginated_response(RedemptionSerializer(page, many=True).data)


@extend_schema(request=FulfillSerializer, responses={200: RedemptionSerializer}, tags=['rewards'])
@api_view(['POST'])
@permission_classes([IsApprovedAdmin])
def fulfill(request, redemption_id):
    """Mark a redemption as handed out (admin only)."""
    serializer = FulfillSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        redemption = fulfill_redemption(
            redemption_id=redemption_id,
            actor=request.user,
            admin_notes=serializer.validated_data['admin_notes'],
        )
    except AinaBucksServiceError as e:
        return error_response(e)

    return success_response(RedemptionSerializer(redemption).data)
