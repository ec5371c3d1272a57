from django.urls import path
from . import views

app_name = 'accounts'

urlpatterns = [
    # Authentication
    path('register/', views.register, name='register'),
    path('login/', views.login, name='login'),
    path('logout/', views.logout, name='logout'),
    path('session/', views.session, name='session'),
    path('profile/', views.profile, name='profile'),

    # Account administration
    path('users/', views.user_list, name='user-list'),
    path('users/pending/', views.pending_users, name='user-pending'),
    path('users/<uuid:user_id>/', views.remove_user, name='user-delete'),
    path('users/<uuid:user_id>/approve/', views.approve_user, name='user-approve'),
    path('users/<uuid:user_id>/reject/', views.reject_user, name='user-reject'),
    path('users/<uuid:user_id>/role/', views.change_role, name='user-role'),
    path('users/<uuid:user_id>/status/', views.change_status, name='user-status'),
]
