from django.contrib import admin

from .models import Attendance


@admin.register(Attendance)
class AttendanceAdmin(admin.ModelAdmin):
    """
    Attendance records.

    Award fields are read-only: awarding goes through the award service so
    the ledger and balances stay in step.
    """

    list_display = ['user', 'event', 'status', 'check_in_time', 'check_out_time', 'hours_worked', 'awarded']
    list_filter = ['status', 'awarded']
    search_fields = ['user__email', 'user__full_name', 'event__title']
    raw_id_fields = ['user', 'event', 'registration']
    readonly_fields = ['hours_worked', 'awarded', 'awarded_at', 'awarded_by', 'created_at', 'updated_at']
