from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'rewards'

router = SimpleRouter()
router.register(r'', views.RewardViewSet, basename='reward')

urlpatterns = [
    # GET    /api/rewards/                        - Active rewards (?all=true for admins)
    # POST   /api/rewards/                        - Create reward (admin)
    # GET    /api/rewards/{id}/                   - Reward detail
    # PUT    /api/rewards/{id}/                   - Update reward (admin)
    # PATCH  /api/rewards/{id}/                   - Partial update (admin)
    # DELETE /api/rewards/{id}/                   - Delete or archive (admin)
    # POST   /api/rewards/{id}/redeem/            - Redeem
    # GET    /api/rewards/redemptions/my/         - Caller's redemptions
    # GET    /api/rewards/redemptions/pending/    - Pending redemptions (admin)
    path('redemptions/<uuid:redemption_id>/fulfill/', views.fulfill, name='fulfill'),
    path('', include(router.urls)),
]
