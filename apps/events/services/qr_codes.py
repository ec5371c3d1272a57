"""
Check-in / check-out links for an event and their QR code images.

Rendering is delegated to an external QR image endpoint
(``settings.QR_CODE_API_URL``); this module only builds URLs.
"""

from urllib.parse import urlencode

from django.conf import settings

from apps.events.models import Event


def get_check_in_url(event: Event) -> str:
    return f"{settings.APP_BASE_URL}/attendance/check-in/{event.id}?token={event.check_in_token}"


def get_check_out_url(event: Event) -> str:
    return f"{settings.APP_BASE_URL}/attendance/check-out/{event.id}?token={event.check_out_token}"


def build_qr_image_url(data: str, size: int = None) -> str:
    size = size or settings.QR_CODE_SIZE
    query = urlencode({'size': f'{size}x{size}', 'data': data})
    return f"{settings.QR_CODE_API_URL}?{query}"


def get_event_qr_codes(event: Event) -> dict:
    """
    Both QR codes of an event.

    Returns:
        {'check_in': {'url', 'qr_code'}, 'check_out': {'url', 'qr_code'}}
    """
    check_in_url = get_check_in_url(event)
    check_out_url = get_check_out_url(event)

    return {
        'event_id': str(event.id),
        'check_in': {
            'url': check_in_url,
            'qr_code': build_qr_image_url(check_in_url),
        },
        'check_out': {
            'url': check_out_url,
            'qr_code': build_qr_image_url(check_out_url),
        },
    }
