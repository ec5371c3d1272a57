"""Profile view service (balances, upcoming events, recent ledger activity)."""

from django.contrib.auth import get_user_model
from django.db.models import F

from apps.common.invalidation import cached_view, profile_key
from apps.ledger.models import AinaBucksTransaction
from apps.registrations.services import get_user_upcoming_events

User = get_user_model()

RECENT_TRANSACTIONS = 5


def get_profile_summary(user) -> dict:
    """
    Return the profile payload for ``user``.

    Served from the view cache; register, cancel, award, redemption and
    adjustment services invalidate it.
    """
    return cached_view(profile_key(user.id), lambda: _build_profile(user.id))


def _build_profile(user_id) -> dict:
    user = User.objects.get(id=user_id)

    upcoming = list(
        get_user_upcoming_events(user_id).values(
            'event_id',
            registration_id=F('id'),
            title=F('event__title'),
            date=F('event__date'),
            start_time=F('event__start_time'),
            location_name=F('event__location_name'),
        )
    )
    recent = list(
        AinaBucksTransaction.objects
        .filter(user_id=user_id)
        .order_by('-created_at')
        .values('id', 'type', 'amount', 'description', 'created_at')[:RECENT_TRANSACTIONS]
    )

    return {
        'id': str(user.id),
        'full_name': user.full_name,
        'email': user.email,
        'role': user.role,
        'status': user.status,
        'current_aina_bucks': user.current_aina_bucks,
        'total_aina_bucks_earned': user.total_aina_bucks_earned,
        'total_aina_bucks_redeemed': user.total_aina_bucks_redeemed,
        'total_hours_volunteered': user.total_hours_volunteered,
        'upcoming_events': upcoming,
        'recent_transactions': recent,
    }
