from django.urls import path
from . import views

app_name = 'registrations'

urlpatterns = [
    path('my/upcoming/', views.my_upcoming, name='my-upcoming'),
    path('events/<uuid:event_id>/register/', views.register, name='register'),
    path('events/<uuid:event_id>/cancel/', views.cancel, name='cancel'),
    path('events/<uuid:event_id>/status/', views.registration_status, name='status'),

    # Admin
    path('events/<uuid:event_id>/roster/', views.roster, name='roster'),
    path('events/<uuid:event_id>/no-shows/', views.no_shows, name='no-shows'),
]
