from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'events'

router = SimpleRouter()
router.register(r'', views.EventViewSet, basename='event')

urlpatterns = [
    # GET    /api/events/                 - Catalog (?search=, ?category=)
    # POST   /api/events/                 - Create event (admin)
    # GET    /api/events/categories/      - Distinct categories
    # GET    /api/events/{id}/            - Event detail
    # PUT    /api/events/{id}/            - Update event (admin)
    # PATCH  /api/events/{id}/            - Partial update (admin)
    # DELETE /api/events/{id}/            - Delete event (admin)
    # GET    /api/events/{id}/qr-codes/   - Check-in / check-out QR codes (admin)
    path('', include(router.urls)),
]
