import re

from rest_framework import serializers

_DIGITS = re.compile(r'\s*[+-]?\d+\s*')


class StringValueField(serializers.CharField):
    """CharField that refuses to coerce numbers/booleans into strings."""

    default_error_messages = {
        'invalid_type': '"value" must be a string',
    }

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail('invalid_type')
        return data


class DigitsIntegerField(serializers.IntegerField):
    """IntegerField that only takes plain decimal digits (no "1_0", no "3.0")."""

    def to_internal_value(self, data):
        if isinstance(data, str) and not _DIGITS.fullmatch(data):
            self.fail('invalid')
        return super().to_internal_value(data)


class StringFilterQuerySerializer(serializers.Serializer):
    is_palindrome = serializers.BooleanField(required=False)
    min_length = DigitsIntegerField(required=False, min_value=0)
    max_length = DigitsIntegerField(required=False, min_value=0)
    word_count = DigitsIntegerField(required=False, min_value=0)
    contains_character = serializers.CharField(
        required=False, min_length=1, max_length=1, trim_whitespace=False)
    # out-of-range paging is clamped, not rejected
    offset = DigitsIntegerField(required=False)
    limit = DigitsIntegerField(required=False)


class PropertiesSerializer(serializers.Serializer):
    length = serializers.IntegerField()
    is_palindrome = serializers.BooleanField()
    unique_characters = serializers.IntegerField()
    word_count = serializers.IntegerField()
    sha256_hash = serializers.CharField()
    character_frequency_map = serializers.DictField(child=serializers.IntegerField())


class StringRecordSerializer(serializers.Serializer):
    id = serializers.CharField(read_only=True)
    value = serializers.CharField(read_only=True, trim_whitespace=False)
    properties = PropertiesSerializer(read_only=True)
    created_at = serializers.CharField(read_only=True)

    def to_representation(self, instance):
        return instance.to_dict()


class StringAnalyzeSerializer(serializers.Serializer):
    # empty and whitespace-only strings are valid values; never trim them
    value = StringValueField(allow_blank=True, trim_whitespace=False)


class FilterResultSerializer(serializers.Serializer):
    data = StringRecordSerializer(many=True)
    count = serializers.IntegerField()
    filters_applied = serializers.DictField()


class InterpretedQuerySerializer(serializers.Serializer):
    original = serializers.CharField()
    parsed_filters = serializers.DictField()


class NaturalLanguageResultSerializer(serializers.Serializer):
    data = StringRecordSerializer(many=True)
    count = serializers.IntegerField()
    interpreted_query = InterpretedQuerySerializer()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()
