from rest_framework import serializers


class StrictIntegerField(serializers.IntegerField):
    """IntegerField that only accepts JSON numbers with no fractional part."""

    default_error_messages = {
        "invalid": "A whole number is required.",
    }

    def to_internal_value(self, data):
        if isinstance(data, bool):
            self.fail("invalid")
        if isinstance(data, float) and data.is_integer():
            data = int(data)
        if not isinstance(data, int):
            self.fail("invalid")
        return super().to_internal_value(data)


class SnapshotIdField(serializers.Field):
    """Accepts a menu item id as sent by the cart: an integer or a non-empty string."""

    default_error_messages = {
        "invalid": "Item id must be an integer or a non-empty string.",
    }

    def to_internal_value(self, data):
        if isinstance(data, bool) or not isinstance(data, int | str):
            self.fail("invalid")
        if isinstance(data, str) and not data.strip():
            self.fail("invalid")
        return data

    def to_representation(self, value):
        return value
