from django.urls import path
from . import views

app_name = 'ledger'

urlpatterns = [
    path('transactions/my/', views.my_transactions, name='my-transactions'),

    # Admin
    path('users/<uuid:user_id>/transactions/', views.user_transactions, name='user-transactions'),
    path('adjust/', views.adjust, name='adjust'),
    path('reconcile/<uuid:user_id>/', views.reconcile, name='reconcile'),
    path('audit/', views.audit, name='audit'),
]
