from django.contrib import admin

from .models import Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = [
        'title',
        'category',
        'date',
        'start_time',
        'location_name',
        'volunteers_needed',
        'bucks_per_hour',
    ]
    list_filter = ['category', 'date', 'state']
    search_fields = ['title', 'description', 'location_name', 'city']
    date_hierarchy = 'date'
    readonly_fields = ['check_in_token', 'check_out_token', 'created_by', 'created_at', 'updated_at']

    fieldsets = (
        ('Basic Information', {
            'fields': ('title', 'category', 'description', 'image_url')
        }),
        ('Schedule', {
            'fields': ('date', 'start_time', 'end_time', 'duration')
        }),
        ('Location', {
            'fields': ('location_name', 'address', 'city', 'state', 'zip_code')
        }),
        ('Volunteers & ʻĀina Bucks', {
            'fields': ('volunteers_needed', 'aina_bucks', 'bucks_per_hour', 'what_to_bring', 'requirements')
        }),
        ('Coordinator', {
            'fields': ('coordinator_name', 'coordinator_email', 'coordinator_phone')
        }),
        ('QR Tokens', {
            'fields': ('check_in_token', 'check_out_token'),
            'classes': ('collapse',),
        }),
        ('Metadata', {
            'fields': ('created_by', 'created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    )
