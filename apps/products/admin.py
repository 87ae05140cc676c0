from django.contrib import admin
from .models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ['tier_label', 'points', 'description']
    search_fields = ['tier_label', 'description']
    ordering = ['id']
