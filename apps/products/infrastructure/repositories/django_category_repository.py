"""
Django ORM implementation of CategoryRepository.
"""
from typing import List, Optional

from django.db import transaction
from django.db.models import Q

from ...domain.entities.category import Category
from ...domain.repositories.category_repository import CategoryRepository
from ..models.category_model import CategoryModel


class DjangoCategoryRepository(CategoryRepository):
    """Django ORM based category repository implementation."""

    def save(self, category: Category) -> Category:
        """Save a category entity."""
        with transaction.atomic():
            model, created = CategoryModel.objects.update_or_create(
                id=category.id,
                defaults={
                    'name': category.name,
                    'slug': category.slug,
                    'description': category.description,
                    'image_url': category.image_url,
                    'parent_id': category.parent_id,
                    'sort_order': category.sort_order,
                    'is_active': category.is_active,
                }
            )
            return self._to_entity(model)

    def find_by_id(self, category_id: int) -> Optional[Category]:
        """Find a category by ID."""
        try:
            model = CategoryModel.objects.get(id=category_id)
            return self._to_entity(model)
        except CategoryModel.DoesNotExist:
            return None

    def find_by_slug(self, slug: str) -> Optional[Category]:
        """Find a category by slug."""
        try:
            model = CategoryModel.objects.get(slug=slug)
            return self._to_entity(model)
        except CategoryModel.DoesNotExist:
            return None

    def find_by_name(self, name: str) -> Optional[Category]:
        """Find a category by exact name."""
        try:
            model = CategoryModel.objects.get(name=name)
            return self._to_entity(model)
        except CategoryModel.DoesNotExist:
            return None

    def exists_by_id(self, category_id: int) -> bool:
        return CategoryModel.objects.filter(id=category_id).exists()

    def exists_by_slug(self, slug: str) -> bool:
        return CategoryModel.objects.filter(slug=slug).exists()

    def exists_by_name(self, name: str) -> bool:
        return CategoryModel.objects.filter(name=name).exists()

    def find_children(self, parent_id: Optional[int], active_only: bool = False) -> List[Category]:
        """Find direct children; root categories when ``parent_id`` is None."""
        if parent_id is None:
            queryset = CategoryModel.objects.filter(parent__isnull=True)
        else:
            queryset = CategoryModel.objects.filter(parent_id=parent_id)
        if active_only:
            queryset = queryset.filter(is_active=True)
        return [self._to_entity(model) for model in queryset.order_by('sort_order', 'id')]

    def find_all(self, is_active: Optional[bool] = None) -> List[Category]:
        """Find all categories."""
        queryset = CategoryModel.objects.all()
        if is_active is not None:
            queryset = queryset.filter(is_active=is_active)
        return [self._to_entity(model) for model in queryset.order_by('sort_order', 'id')]

    def search(self, keyword: str, offset: int = 0, limit: int = 20) -> List[Category]:
        """Search active categories by name or description."""
        queryset = CategoryModel.objects.filter(
            Q(name__icontains=keyword) | Q(description__icontains=keyword),
            is_active=True,
        )
        models = queryset.order_by('sort_order', 'id')[offset:offset + limit]
        return [self._to_entity(model) for model in models]

    def count(self, is_active: Optional[bool] = None) -> int:
        queryset = CategoryModel.objects.all()
        if is_active is not None:
            queryset = queryset.filter(is_active=is_active)
        return queryset.count()

    def delete(self, category_id: int) -> bool:
        """Delete a category."""
        deleted, _ = CategoryModel.objects.filter(id=category_id).delete()
        return deleted > 0

    def _to_entity(self, model: CategoryModel) -> Category:
        """Convert Django model to domain entity."""
        return Category(
            id=model.id,
            name=model.name,
            slug=model.slug,
            description=model.description,
            image_url=model.image_url,
            parent_id=model.parent_id,
            sort_order=model.sort_order,
            is_active=model.is_active,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
