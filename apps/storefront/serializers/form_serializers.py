"""
Form serializers for the storefront endpoints.

Fields are parsed leniently here; missing or blank values are rejected by
StorefrontService so every transport gets the same validation messages.
"""
from rest_framework import serializers


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)
    password = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)


class RegistrationSerializer(LoginSerializer):
    email = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class PurchaseSerializer(serializers.Serializer):
    """
    Purchase form. ``task_category`` is the field name the catalog page
    posts; ``tier_label`` is accepted as an alias.
    """
    task_category = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)
    tier_label = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)

    def get_tier_label(self):
        data = self.validated_data
        return data.get('task_category') or data.get('tier_label')
