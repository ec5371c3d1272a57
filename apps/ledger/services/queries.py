"""Read-only ledger queries."""

from uuid import UUID

from django.db.models import QuerySet

from apps.ledger.models import AinaBucksTransaction


def get_user_transactions(user_id: UUID) -> QuerySet[AinaBucksTransaction]:
    """A user's ledger entries, newest first."""
    return (
        AinaBucksTransaction.objects
        .filter(user_id=user_id)
        .select_related('event', 'approved_by')
        .order_by('-created_at')
    )
