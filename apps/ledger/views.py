from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsApprovedAdmin, IsApprovedUser
from apps.common.exceptions import AinaBucksServiceError
from apps.common.responses import StandardPagination, error_response, success_response

from .serializers import AdjustBalanceSerializer, ReconciliationSerializer, TransactionSerializer
from .services import (
    adjust_balance,
    audit_balances,
    get_user_transactions,
    reconcile_user_balance,
    repair_user_balance,
)


def _paginated_transactions(request, user_id):
    paginator = StandardPagination()
    page = paginator.paginate_queryset(get_user_transactions(user_id), request)
    return paginator.get_paginated_response(TransactionSerializer(page, many=True).data)


@extend_schema(responses={200: TransactionSerializer(many=True)}, tags=['ledger'])
@api_view(['GET'])
@permission_classes([IsApprovedUser])
def my_transactions(request):
    """The caller's ʻĀina Bucks history, newest first."""
    return _paginated_transactions(request, request.user.id)


@extend_schema(responses={200: TransactionSerializer(many=True)}, tags=['ledger'])
@api_view(['GET'])
@permission_classes([IsApprovedAdmin])
def user_transactions(request, user_id):
    return _paginated_transactions(request, user_id)


@extend_schema(request=AdjustBalanceSerializer, responses={201: TransactionSerializer}, tags=['ledger'])
@api_view(['POST'])
@permission_classes([IsApprovedAdmin])
def adjust(request):
    """Credit or debit a user's balance with an ADJUSTED entry."""
    serializer = AdjustBalanceSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        entry = adjust_balance(actor=request.user, **serializer.validated_data)
    except AinaBucksServiceError as e:
        return error_response(e)

    return success_response(TransactionSerializer(entry).data, status.HTTP_201_CREATED)


@extend_schema(request=None, responses={200: ReconciliationSerializer}, tags=['ledger'])
@api_view(['GET', 'POST'])
@permission_classes([IsApprovedAdmin])
def reconcile(request, user_id):
    """GET reports drift between balances and the ledger, POST also repairs it."""
    try:
        if request.method == 'POST':
            report = repair_user_balance(user_id=user_id, actor=request.user)
        else:
            report = reconcile_user_balance(user_id=user_id)
    except AinaBucksServiceError as e:
        return error_response(e)

    return success_response(ReconciliationSerializer(report).data)


@extend_schema(responses={200: ReconciliationSerializer(many=True)}, tags=['ledger'])
@api_view(['GET'])
@permission_classes([IsApprovedAdmin])
def audit(request):
    """Users whose stored balances disagree with the ledger."""
    return success_response(ReconciliationSerializer(audit_balances(), many=True).data)
