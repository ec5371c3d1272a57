"""
Cached view keys and their invalidation.

Read services cache rendered payloads (event catalog, event detail, user
profile) under the keys below. Mutating services call ``invalidate_views``
with the keys they make stale; deletion runs after the surrounding
transaction commits and is fire-and-forget.
"""

from uuid import UUID

from django.conf import settings
from django.core.cache import cache
from django.db import transaction

EVENT_CATALOG_KEY = 'views:events:catalog'


def event_detail_key(event_id):
    return f'views:events:{UUID(str(event_id))}'


def profile_key(user_id):
    return f'views:profile:{user_id}'


def cached_view(key, compute):
    """Return the cached payload for ``key``, computing it on a miss."""
    return cache.get_or_set(key, compute, timeout=settings.VIEW_CACHE_TIMEOUT)


def invalidate_views(*keys):
    keys = [key for key in keys if key]
    if not keys:
        return
    transaction.on_commit(lambda: cache.delete_many(keys))
