from django.db import connection, DatabaseError
from django.http import JsonResponse


def health_check(request):
    """Liveness probe, also touches the database."""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
    except DatabaseError:
        return JsonResponse({'status': 'unhealthy', 'database': 'unreachable'}, status=503)
    return JsonResponse({'status': 'ok'})


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({
        'success': False,
        'error': 'Not found',
        'code': 'not_found',
    }, status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse({
        'success': False,
        'error': 'Internal server error',
        'code': 'server_error',
    }, status=500)
