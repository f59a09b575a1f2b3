from rest_framework import serializers

from .conf import RESOURCE_TYPES


class CurrentResourceSerializer(serializers.Serializer):
    """Optional reference to the resource the caller is displaying."""

    resource_type = serializers.ChoiceField(choices=RESOURCE_TYPES, required=False)
    resource_id = serializers.IntegerField(required=False, min_value=1)

    def validate(self, attrs):
        if ("resource_type" in attrs) != ("resource_id" in attrs):
            raise serializers.ValidationError(
                "resource_type and resource_id must be given together"
            )
        return attrs


class TranslateQuerySerializer(CurrentResourceSerializer):
    """Query parameters of the translate endpoint."""

    url = serializers.CharField()
    language = serializers.CharField(max_length=10)


class TranslatedUrlSerializer(serializers.Serializer):
    url = serializers.CharField()
    language = serializers.CharField()


class AlternatesRequestSerializer(CurrentResourceSerializer):
    """Alternate links produced by the host, keyed by language code."""

    current_url = serializers.CharField()
    alternate_links = serializers.DictField(child=serializers.CharField())


class RouteQuerySerializer(serializers.Serializer):
    resource_type = serializers.CharField()
    slug = serializers.CharField()
    language = serializers.CharField()
    page = serializers.IntegerField(allow_null=True)


class RouteRuleSerializer(serializers.Serializer):
    pattern = serializers.CharField()
    supports_pagination = serializers.BooleanField()
    query = RouteQuerySerializer()


class RebuildResultSerializer(serializers.Serializer):
    rules = serializers.IntegerField()


class ResolvedResourceSerializer(serializers.Serializer):
    """A resource served by the host dispatcher."""

    resource_type = serializers.CharField()
    id = serializers.IntegerField()
    slug = serializers.CharField()
    title = serializers.CharField()
    language = serializers.CharField()
    page = serializers.IntegerField(allow_null=True)
    url = serializers.CharField()
    alternates = serializers.DictField(child=serializers.CharField())
