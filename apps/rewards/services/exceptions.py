"""Domain-specific exceptions for rewards services."""

from apps.common.exceptions import ConflictError, NotFoundError


class RewardNotFoundError(NotFoundError):
    default_message = 'Reward not found.'


class RedemptionNotFoundError(NotFoundError):
    default_message = 'Redemption not found.'


class RewardUnavailableError(ConflictError):
    """Raised when redeeming an inactive or archived reward."""
    code = 'reward_unavailable'
    default_message = 'This reward is not available.'


class OutOfStockError(ConflictError):
    code = 'out_of_stock'
    default_message = 'This reward is out of stock.'


class RedemptionAlreadyFulfilledError(ConflictError):
    code = 'already_fulfilled'
    default_message = 'This redemption has already been fulfilled.'
