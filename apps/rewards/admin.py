from django.contrib import admin

from .models import Reward, RewardRedemption


@admin.register(Reward)
class RewardAdmin(admin.ModelAdmin):
    list_display = ['name', 'aina_bucks_cost', 'quantity_available', 'quantity_redeemed', 'status']
    list_filter = ['status']
    search_fields = ['name', 'description']
    readonly_fields = ['quantity_redeemed', 'created_by', 'created_at', 'updated_at']


@admin.register(RewardRedemption)
class RewardRedemptionAdmin(admin.ModelAdmin):
    list_display = ['user', 'reward', 'quantity', 'aina_bucks_spent', 'status', 'created_at']
    list_filter = ['status', 'created_at']
    search_fields = ['user__email', 'reward__name']
    readonly_fields = [
        'user',
        'reward',
        'transaction',
        'quantity',
        'aina_bucks_spent',
        'fulfilled_by',
        'fulfilled_at',
        'created_at',
    ]
