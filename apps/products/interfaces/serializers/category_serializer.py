"""
Category serializers.
"""
from rest_framework import serializers

from ...application.dtos.category_dto import CategoryCreateDTO, CategoryUpdateDTO
from ...domain.entities.category import MAX_NAME_LENGTH
from ...domain.value_objects.slug import MAX_SLUG_LENGTH


class CategorySerializer(serializers.Serializer):
    """Serializer for category output."""
    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    slug = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    image_url = serializers.CharField(read_only=True)
    parent_id = serializers.IntegerField(read_only=True, allow_null=True)
    sort_order = serializers.IntegerField(read_only=True)
    is_active = serializers.BooleanField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class CategoryTreeSerializer(serializers.Serializer):
    """Serializer for nested tree nodes."""
    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    slug = serializers.CharField(read_only=True)
    sort_order = serializers.IntegerField(read_only=True)
    is_active = serializers.BooleanField(read_only=True)
    depth = serializers.IntegerField(read_only=True)
    children = serializers.SerializerMethodField()

    def get_children(self, obj):
        return CategoryTreeSerializer(obj.children, many=True).data


class CategoryCreateSerializer(serializers.Serializer):
    """Serializer for category creation."""
    name = serializers.CharField(max_length=MAX_NAME_LENGTH)
    slug = serializers.SlugField(max_length=MAX_SLUG_LENGTH)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    image_url = serializers.CharField(required=False, allow_blank=True, default='', max_length=500)
    parent_id = serializers.IntegerField(required=False, allow_null=True, default=None)
    sort_order = serializers.IntegerField(required=False, allow_null=True, default=None, min_value=0)
    is_active = serializers.BooleanField(required=False, default=True)

    def to_dto(self) -> CategoryCreateDTO:
        return CategoryCreateDTO(**self.validated_data)


class CategoryUpdateSerializer(serializers.Serializer):
    """Serializer for category update. Omitted fields stay unchanged."""
    name = serializers.CharField(max_length=MAX_NAME_LENGTH, required=False)
    slug = serializers.SlugField(max_length=MAX_SLUG_LENGTH, required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    image_url = serializers.CharField(required=False, allow_blank=True, max_length=500)
    sort_order = serializers.IntegerField(required=False, min_value=0)
    parent_id = serializers.IntegerField(required=False)

    def to_dto(self) -> CategoryUpdateDTO:
        return CategoryUpdateDTO(**self.validated_data)


class CategoryMoveSerializer(serializers.Serializer):
    """Serializer for moving a category; a null parent moves it to the root."""
    new_parent_id = serializers.IntegerField(allow_null=True)


class CategoryReorderSerializer(serializers.Serializer):
    """Serializer for reordering siblings."""
    parent_id = serializers.IntegerField(required=False, allow_null=True, default=None)
    category_ids = serializers.ListField(child=serializers.IntegerField(), allow_empty=False)

    def validate_category_ids(self, value):
        if len(set(value)) != len(value):
            raise serializers.ValidationError("Category ids must be unique.")
        return value
