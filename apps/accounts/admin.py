from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html

from .models import AccountStatus, Role, User

STATUS_COLORS = {
    AccountStatus.PENDING: '#E5C49A',
    AccountStatus.APPROVED: '#6B8E5E',
    AccountStatus.REJECTED: '#B85C5C',
}


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """
    Volunteer and administrator accounts.

    Balances are read-only here: they are maintained by the award,
    redemption and adjustment services alongside the ledger.
    """

    list_display = [
        'email',
        'full_name',
        'role_badge',
        'status_badge',
        'current_aina_bucks',
        'total_hours_volunteered',
        'created_at',
    ]

    list_filter = ['role', 'status', 'is_active', 'created_at']
    search_fields = ['email', 'full_name']
    ordering = ['-created_at']
    date_hierarchy = 'created_at'

    fieldsets = (
        ('Basic Information', {
            'fields': ('email', 'full_name', 'password')
        }),
        ('Access', {
            'fields': ('role', 'status', 'is_active', 'is_staff', 'is_superuser'),
        }),
        ('ʻĀina Bucks', {
            'fields': (
                'current_aina_bucks',
                'total_aina_bucks_earned',
                'total_aina_bucks_redeemed',
                'total_hours_volunteered',
            ),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )

    add_fieldsets = (
        ('Create User', {
            'classes': ('wide',),
            'fields': ('email', 'full_name', 'password1', 'password2'),
        }),
        ('Access', {
            'fields': ('role', 'status'),
        }),
    )

    readonly_fields = [
        'current_aina_bucks',
        'total_aina_bucks_earned',
        'total_aina_bucks_redeemed',
        'total_hours_volunteered',
        'created_at',
        'last_login',
    ]

    def role_badge(self, obj):
        color = '#A47449' if obj.role == Role.ADMIN else '#ccc'
        return format_html(
            '<span style="background: {}; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            color,
            obj.get_role_display(),
        )
    role_badge.short_description = 'Role'
    role_badge.admin_order_field = 'role'

    def status_badge(self, obj):
        return format_html(
            '<span style="background: {}; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            STATUS_COLORS.get(obj.status, '#ccc'),
            obj.get_status_display(),
        )
    status_badge.short_description = 'Status'
    status_badge.admin_order_field = 'status'

    actions = ['approve_accounts', 'reject_accounts']

    @admin.action(description='Approve selected pending accounts')
    def approve_accounts(self, request, queryset):
        count = queryset.filter(status=AccountStatus.PENDING).update(status=AccountStatus.APPROVED)
        self.message_user(request, f'Approved {count} account(s).')

    @admin.action(description='Reject selected pending accounts')
    def reject_accounts(self, request, queryset):
        count = queryset.filter(status=AccountStatus.PENDING).update(status=AccountStatus.REJECTED)
        self.message_user(request, f'Rejected {count} account(s).')
