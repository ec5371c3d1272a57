"""Services for rewards business logic."""

from .exceptions import (
    RewardNotFoundError,
    RedemptionNotFoundError,
    RewardUnavailableError,
    OutOfStockError,
    RedemptionAlreadyFulfilledError,
)
from .redemption import (
    redeem_reward,
    get_user_redemptions,
    get_pending_redemptions,
    fulfill_redemption,
)
from .reward_management import (
    get_active_rewards,
    get_all_rewards,
    create_reward,
    update_reward,
    delete_reward,
)

__all__ = [
    # Exceptions
    'RewardNotFoundError',
    'RedemptionNotFoundError',
    'RewardUnavailableError',
    'OutOfStockError',
    'RedemptionAlreadyFulfilledError',
    # Services
    'redeem_reward',
    'get_user_redemptions',
    'get_pending_redemptions',
    'fulfill_redemption',
    'get_active_rewards',
    'get_all_rewards',
    'create_reward',
    'update_reward',
    'delete_reward',
]
