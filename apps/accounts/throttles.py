from rest_framework.throttling import AnonRateThrottle


class AuthRateThrottle(AnonRateThrottle):
    """
    Sign-in / sign-up limiter, keyed by client IP.

    Fixed window, rate from ``DEFAULT_THROTTLE_RATES['auth']``.
    """
    scope = 'auth'
