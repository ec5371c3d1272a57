from django.contrib import admin

from .models import AinaBucksTransaction


@admin.register(AinaBucksTransaction)
class AinaBucksTransactionAdmin(admin.ModelAdmin):
    """Read-only view of the ledger. Corrections go through balance adjustments."""

    list_display = ['user', 'type', 'amount', 'hours_worked', 'event', 'approved_by', 'created_at']
    list_filter = ['type', 'created_at']
    search_fields = ['user__email', 'description']
    date_hierarchy = 'created_at'

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
