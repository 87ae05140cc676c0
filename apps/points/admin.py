from django.contrib import admin
from .models import PurchaseEvent


@admin.register(PurchaseEvent)
class PurchaseEventAdmin(admin.ModelAdmin):
    list_display = ['username', 'points', 'awarded_at']
    list_filter = ['awarded_at']
    search_fields = ['username']
    readonly_fields = ['username', 'points', 'awarded_at']

    def has_add_permission(self, request):
        return False  # Events are created by the ledger

    def has_change_permission(self, request, obj=None):
        return False  # Events are immutable

    def has_delete_permission(self, request, obj=None):
        return False
