from django.urls import path
from . import views

app_name = 'attendance'

urlpatterns = [
    # Volunteer QR scans
    path('check-in/<uuid:event_id>/', views.check_in_view, name='check-in'),
    path('check-out/<uuid:event_id>/', views.check_out_view, name='check-out'),

    # Admin
    path('events/<uuid:event_id>/', views.event_attendance, name='event-attendance'),
    path('events/<uuid:event_id>/summary/', views.attendance_summary, name='summary'),
    path('events/<uuid:event_id>/close-out/', views.close_out, name='close-out'),
    path('<uuid:attendance_id>/award/', views.award, name='award'),
]
