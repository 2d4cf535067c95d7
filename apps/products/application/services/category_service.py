"""
Category hierarchy service.

The tree is kept as rows with a nullable parent id. Every walk over it is
iterative and remembers the ids it has visited, so a corrupted chain surfaces
as a ``CircularReferenceError`` instead of an endless loop.
"""
import logging
from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

from ...domain.entities.category import Category, MAX_CATEGORY_DEPTH
from ...domain.exceptions import (
    CategoryAlreadyExistsError,
    CategoryDeleteError,
    CategoryNotFoundError,
    CircularReferenceError,
    InvalidCategoryDataError,
)
from ...domain.repositories.category_repository import CategoryRepository
from ...domain.repositories.product_repository import ProductRepository
from ...domain.value_objects.slug import Slug
from ..dtos.category_dto import CategoryCreateDTO, CategoryTreeNodeDTO, CategoryUpdateDTO

logger = logging.getLogger(__name__)

PATH_SEPARATOR = " > "


@dataclass
class CategoryService:
    """Service for category tree operations."""

    category_repository: CategoryRepository
    product_repository: ProductRepository
    max_depth: int = MAX_CATEGORY_DEPTH

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def find_by_id(self, category_id: int) -> Category:
        """Get category by ID or raise ``CategoryNotFoundError``."""
        logger.debug("Find category by id: %s", category_id)
        category = self.category_repository.find_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)
        return category

    def find_by_id_optional(self, category_id: int) -> Optional[Category]:
        return self.category_repository.find_by_id(category_id)

    def find_by_slug(self, slug: str) -> Category:
        logger.debug("Find category by slug: %s", slug)
        category = self.category_repository.find_by_slug(slug)
        if category is None:
            raise CategoryNotFoundError(slug, field="slug")
        return category

    def find_by_name(self, name: str) -> Category:
        logger.debug("Find category by name: %s", name)
        category = self.category_repository.find_by_name(name)
        if category is None:
            raise CategoryNotFoundError(name, field="name")
        return category

    def find_all_active_categories(self) -> List[Category]:
        return self.category_repository.find_all(is_active=True)

    def find_root_categories(self) -> List[Category]:
        return self.category_repository.find_children(None)

    def find_children_by_parent_id(self, parent_id: int) -> List[Category]:
        """Get direct children of a category; the parent must exist."""
        if not self.category_repository.exists_by_id(parent_id):
            raise CategoryNotFoundError(parent_id)
        return self.category_repository.find_children(parent_id)

    def search_categories(self, keyword: Optional[str], offset: int = 0, limit: int = 20) -> List[Category]:
        """Search active categories by name or description. A blank keyword lists them all."""
        logger.debug("Search categories: keyword=%s", keyword)
        if not keyword or not keyword.strip():
            return self.find_all_active_categories()[offset:offset + limit]
        return self.category_repository.search(keyword.strip(), offset=offset, limit=limit)

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    def create_category(self, dto: CategoryCreateDTO) -> Category:
        """
        Create a new category.

        Raises:
            InvalidCategoryDataError: name/slug missing or malformed, or the
                parent is already at the maximum depth.
            CategoryAlreadyExistsError: slug or name already taken.
            CategoryNotFoundError: the requested parent does not exist.
        """
        logger.info("Create category: name=%s, slug=%s", dto.name, dto.slug)

        category = Category.create(
            name=dto.name,
            slug=dto.slug,
            description=dto.description,
            parent_id=dto.parent_id,
            image_url=dto.image_url,
        )

        if self.category_repository.exists_by_slug(category.slug):
            logger.warning("Category already exists with slug: %s", category.slug)
            raise CategoryAlreadyExistsError("slug", category.slug)
        if self.category_repository.exists_by_name(category.name):
            logger.warning("Category already exists with name: %s", category.name)
            raise CategoryAlreadyExistsError("name", category.name)

        if dto.parent_id is not None:
            if not self.category_repository.exists_by_id(dto.parent_id):
                raise CategoryNotFoundError(dto.parent_id)
            self._validate_depth(dto.parent_id)

        category.sort_order = (
            dto.sort_order if dto.sort_order is not None else self._next_sort_order(dto.parent_id)
        )
        if not dto.is_active:
            category.is_active = False

        saved = self.category_repository.save(category)
        logger.info("Category created: id=%s, name=%s", saved.id, saved.name)
        return saved

    def update_category(self, category_id: int, dto: CategoryUpdateDTO) -> Category:
        """Update category details; a new parent goes through the move checks."""
        logger.info("Update category: id=%s", category_id)
        category = self.find_by_id(category_id)

        if dto.slug is not None:
            new_slug = Slug(value=dto.slug).value
            if new_slug != category.slug and self.category_repository.exists_by_slug(new_slug):
                raise CategoryAlreadyExistsError("slug", new_slug)
        if dto.name is not None:
            new_name = Category.validate_name(dto.name)
            if new_name != category.name and self.category_repository.exists_by_name(new_name):
                raise CategoryAlreadyExistsError("name", new_name)

        if dto.parent_id is not None and dto.parent_id != category.parent_id:
            self._validate_new_parent(category, dto.parent_id)
            category.move_to(dto.parent_id, self._next_sort_order(dto.parent_id))

        category.update(
            name=dto.name,
            slug=dto.slug,
            description=dto.description,
            image_url=dto.image_url,
            sort_order=dto.sort_order,
        )
        saved = self.category_repository.save(category)
        logger.info("Category updated: id=%s", saved.id)
        return saved

    def delete_category(self, category_id: int) -> Category:
        """Soft delete: same as deactivating the category and its subtree."""
        logger.info("Delete category (soft): id=%s", category_id)
        return self.deactivate_category(category_id)

    def delete_category_permanently(self, category_id: int) -> None:
        """Remove a category row. Only allowed for leaves without products."""
        logger.info("Delete category permanently: id=%s", category_id)
        category = self.find_by_id(category_id)

        product_count = self.product_repository.count_by_category(category_id)
        children_count = len(self.category_repository.find_children(category_id))
        if product_count > 0 or children_count > 0:
            raise CategoryDeleteError(category_id, category.name, product_count, children_count)

        self.category_repository.delete(category_id)
        logger.info("Category permanently deleted: id=%s", category_id)

    # ------------------------------------------------------------------
    # Hierarchy management
    # ------------------------------------------------------------------

    def move_category(self, category_id: int, new_parent_id: Optional[int]) -> Category:
        """
        Re-parent a category. ``None`` moves it to the root level.

        The moved category is appended after its new siblings.

        Raises:
            CategoryNotFoundError: either id is unknown.
            CircularReferenceError: the new parent is the category itself or
                one of its descendants.
            InvalidCategoryDataError: the move would exceed the maximum depth.
        """
        logger.info("Move category: id=%s, new_parent_id=%s", category_id, new_parent_id)
        category = self.find_by_id(category_id)

        if new_parent_id is not None:
            self._validate_new_parent(category, new_parent_id)

        category.move_to(new_parent_id, self._next_sort_order(new_parent_id, exclude_id=category.id))
        moved = self.category_repository.save(category)
        logger.info("Category moved: id=%s, parent_id=%s", moved.id, moved.parent_id)
        return moved

    def update_sort_order(self, category_id: int, sort_order: int) -> Category:
        logger.info("Update category sort order: id=%s, sort_order=%s", category_id, sort_order)
        category = self.find_by_id(category_id)
        category.change_sort_order(sort_order)
        return self.category_repository.save(category)

    def reorder_categories(self, parent_id: Optional[int], ordered_ids: List[int]) -> List[Category]:
        """
        Renumber the children of ``parent_id``.

        Listed categories get ``sort_order`` equal to their index in
        ``ordered_ids``. Siblings that were not listed keep their previous
        relative order and are numbered after the listed ones.

        Returns the full sibling list in its new order.
        """
        logger.info("Reorder categories: parent_id=%s, ids=%s", parent_id, ordered_ids)

        if parent_id is not None and not self.category_repository.exists_by_id(parent_id):
            raise CategoryNotFoundError(parent_id)
        if len(set(ordered_ids)) != len(ordered_ids):
            raise InvalidCategoryDataError(
                "Reorder request contains duplicate category ids",
                field="category_ids",
                value=ordered_ids,
            )

        siblings = self.category_repository.find_children(parent_id)
        by_id = {category.id: category for category in siblings}
        for category_id in ordered_ids:
            if category_id in by_id:
                continue
            if not self.category_repository.exists_by_id(category_id):
                raise CategoryNotFoundError(category_id)
            raise InvalidCategoryDataError(
                f"Category {category_id} is not a child of {parent_id if parent_id is not None else 'the root'}",
                field="category_ids",
                value=category_id,
            )

        listed = [by_id[category_id] for category_id in ordered_ids]
        listed_ids = set(ordered_ids)
        unlisted = [category for category in siblings if category.id not in listed_ids]

        reordered = []
        for position, category in enumerate(listed + unlisted):
            if category.sort_order != position:
                category.change_sort_order(position)
                category = self.category_repository.save(category)
            reordered.append(category)

        logger.info("Categories reordered: parent_id=%s, count=%s", parent_id, len(reordered))
        return reordered

    # ------------------------------------------------------------------
    # Tree queries
    # ------------------------------------------------------------------

    def get_category_depth(self, category_id: int) -> int:
        """Number of parent hops up to a root. Roots have depth 0."""
        category = self.find_by_id(category_id)
        return sum(1 for _ in self._iter_ancestors(category))

    def find_all_ancestors(self, category_id: int) -> List[Category]:
        """Ancestors of a category ordered from the root down to its parent."""
        logger.debug("Find all ancestors: id=%s", category_id)
        category = self.find_by_id(category_id)
        ancestors = list(self._iter_ancestors(category))
        ancestors.reverse()
        return ancestors

    def find_all_descendants(self, category_id: int) -> List[Category]:
        """Every category below ``category_id``, breadth first."""
        logger.debug("Find all descendants: id=%s", category_id)
        root = self.find_by_id(category_id)

        descendants: List[Category] = []
        seen = {root.id}
        queue = deque([root.id])
        while queue:
            current_id = queue.popleft()
            for child in self.category_repository.find_children(current_id):
                if child.id in seen:
                    raise CircularReferenceError(child.id, current_id)
                seen.add(child.id)
                descendants.append(child)
                queue.append(child.id)
        return descendants

    def get_category_path(self, category_id: int) -> str:
        """Human readable path, e.g. ``Electronics > Smartphones > Android``."""
        category = self.find_by_id(category_id)
        names = [ancestor.name for ancestor in self._iter_ancestors(category)]
        names.reverse()
        names.append(category.name)
        return PATH_SEPARATOR.join(names)

    def is_ancestor_of(self, ancestor_id: int, descendant_id: int) -> bool:
        """True when walking up from ``descendant_id`` reaches ``ancestor_id``."""
        if ancestor_id == descendant_id:
            return False
        descendant = self.category_repository.find_by_id(descendant_id)
        if descendant is None:
            return False
        return any(ancestor.id == ancestor_id for ancestor in self._iter_ancestors(descendant))

    def find_categories_by_depth(self, depth: int) -> List[Category]:
        """All categories sitting exactly ``depth`` levels below the roots."""
        if depth < 0:
            raise InvalidCategoryDataError("Depth cannot be negative", field="depth", value=depth)

        level = self.find_root_categories()
        for _ in range(depth):
            if not level:
                break
            next_level: List[Category] = []
            for category in level:
                next_level.extend(self.category_repository.find_children(category.id))
            level = next_level
        return level

    def get_category_tree(self, active_only: bool = True) -> List[CategoryTreeNodeDTO]:
        """Nested tree of all root categories, built from one adjacency index."""
        logger.debug("Build category tree: active_only=%s", active_only)
        children_by_parent = self._children_index(active_only)
        return self._build_tree(children_by_parent.get(None, []), children_by_parent, root_depth=0)

    def get_category_subtree(self, root_category_id: int, active_only: bool = False) -> CategoryTreeNodeDTO:
        """Nested tree rooted at a specific category."""
        root = self.find_by_id(root_category_id)
        depth = sum(1 for _ in self._iter_ancestors(root))
        children_by_parent = self._children_index(active_only)
        return self._build_tree([root], children_by_parent, root_depth=depth)[0]

    # ------------------------------------------------------------------
    # Status management
    # ------------------------------------------------------------------

    def activate_category(self, category_id: int) -> Category:
        logger.info("Activate category: id=%s", category_id)
        category = self.find_by_id(category_id)
        category.activate()
        return self.category_repository.save(category)

    def deactivate_category(self, category_id: int) -> Category:
        """
        Deactivate a category and every descendant.

        Already inactive nodes are skipped, so calling this twice is harmless.
        """
        logger.info("Deactivate category: id=%s", category_id)
        category = self.find_by_id(category_id)

        if category.deactivate():
            category = self.category_repository.save(category)

        cascaded = 0
        for descendant in self.find_all_descendants(category_id):
            if descendant.deactivate():
                self.category_repository.save(descendant)
                cascaded += 1

        logger.info("Category deactivated: id=%s, descendants_deactivated=%s", category_id, cascaded)
        return category

    # ------------------------------------------------------------------
    # Validation and utilities
    # ------------------------------------------------------------------

    def exists_by_slug(self, slug: str) -> bool:
        return self.category_repository.exists_by_slug(slug)

    def exists_by_name(self, name: str) -> bool:
        return self.category_repository.exists_by_name(name)

    def exists_by_name_and_parent(self, name: str, parent_id: Optional[int]) -> bool:
        siblings = self.category_repository.find_children(parent_id)
        return any(category.name == name for category in siblings)

    def get_product_count(self, category_id: int) -> int:
        self.find_by_id(category_id)
        return self.product_repository.count_by_category(category_id)

    def has_children(self, category_id: int) -> bool:
        return bool(self.category_repository.find_children(category_id))

    def count_all_categories(self) -> int:
        return self.category_repository.count()

    def count_active_categories(self) -> int:
        return self.category_repository.count(is_active=True)

    def count_root_categories(self) -> int:
        return len(self.find_root_categories())

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _iter_ancestors(self, category: Category) -> Iterator[Category]:
        """Yield ancestors nearest first."""
        seen = {category.id}
        parent_id = category.parent_id
        while parent_id is not None:
            if parent_id in seen:
                raise CircularReferenceError(category.id, parent_id)
            seen.add(parent_id)
            parent = self.category_repository.find_by_id(parent_id)
            if parent is None:
                logger.warning("Dangling parent reference: category=%s, parent=%s", category.id, parent_id)
                return
            yield parent
            parent_id = parent.parent_id

    def _validate_new_parent(self, category: Category, new_parent_id: int) -> None:
        if new_parent_id == category.id:
            raise CircularReferenceError(category.id, new_parent_id, category.name, category.name)

        new_parent = self.find_by_id(new_parent_id)
        for ancestor in self._iter_ancestors(new_parent):
            if ancestor.id == category.id:
                logger.warning(
                    "Circular reference rejected: category=%s, new_parent=%s", category.id, new_parent_id
                )
                raise CircularReferenceError(category.id, new_parent_id, category.name, new_parent.name)

        self._validate_depth(new_parent_id, subtree_height=self._subtree_height(category.id))

    def _validate_depth(self, parent_id: int, subtree_height: int = 0) -> None:
        """The deepest node of the (moved) subtree must stay above ``max_depth``."""
        parent_depth = self.get_category_depth(parent_id)
        deepest = parent_depth + 1 + subtree_height
        if deepest > self.max_depth - 1:
            raise InvalidCategoryDataError(
                f"Category depth exceeds maximum allowed depth: {self.max_depth}",
                field="parent_id",
                value=parent_id,
            )

    def _subtree_height(self, category_id: int) -> int:
        height = 0
        level = [category_id]
        seen = {category_id}
        while level:
            next_level = []
            for current_id in level:
                for child in self.category_repository.find_children(current_id):
                    if child.id not in seen:
                        seen.add(child.id)
                        next_level.append(child.id)
            if next_level:
                height += 1
            level = next_level
        return height

    def _next_sort_order(self, parent_id: Optional[int], exclude_id: Optional[int] = None) -> int:
        siblings = [
            category for category in self.category_repository.find_children(parent_id)
            if category.id != exclude_id
        ]
        return max((category.sort_order for category in siblings), default=-1) + 1

    def _children_index(self, active_only: bool) -> Dict[Optional[int], List[Category]]:
        children_by_parent: Dict[Optional[int], List[Category]] = defaultdict(list)
        for category in self.category_repository.find_all(is_active=True if active_only else None):
            children_by_parent[category.parent_id].append(category)
        return children_by_parent

    @staticmethod
    def _build_tree(
        roots: List[Category],
        children_by_parent: Dict[Optional[int], List[Category]],
        root_depth: int,
    ) -> List[CategoryTreeNodeDTO]:
        nodes = []
        stack = []
        seen = set()
        for root in roots:
            node = CategoryTreeNodeDTO.from_entity(root, root_depth)
            nodes.append(node)
            stack.append((root, node))
            seen.add(root.id)

        while stack:
            category, node = stack.pop()
            for child in children_by_parent.get(category.id, []):
                if child.id in seen:
                    continue
                seen.add(child.id)
                child_node = CategoryTreeNodeDTO.from_entity(child, node.depth + 1)
                node.children.append(child_node)
                stack.append((child, child_node))
        return nodes
