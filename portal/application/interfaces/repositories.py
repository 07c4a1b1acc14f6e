"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs or domain enums only; no infrastructure imports.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol, Self

if TYPE_CHECKING:
    from portal.application.dtos.catalog import BreadcrumbResult
    from portal.domain.enums import SearchEntity


class ISearchRepository(Protocol):
    """Protocol for the search persistence collaborator.

    Used as an async context manager: entering acquires the persistence
    resource for the request (and fails fast when it is unreachable), exiting
    releases it on every path.
    """

    async def __aenter__(self) -> Self:
        """Acquire the persistence resource."""

    async def __aexit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        """Release the persistence resource; release errors are logged, not raised."""

    async def find_matching(
        self,
        entity: SearchEntity,
        term: str,
        limit: int,
        *,
        fields: Sequence[str],
        ancestors: Sequence[str] = (),
    ) -> Sequence[Any]:
        """Return up to limit records of entity where any of fields contains term (case-insensitive).

        ancestors are dotted relation paths (e.g. "product.brand") that must be
        loaded on the returned records.
        """


class ICatalogRepository(Protocol):
    """Protocol for catalog lookups used by breadcrumb endpoints."""

    async def get_product_breadcrumb(self, product_id: str) -> BreadcrumbResult | None:
        """Return id and name of the product, or None."""

    async def get_subcategory_breadcrumb(
        self, subcategory_id: str
    ) -> BreadcrumbResult | None:
        """Return id and name of the product subcategory, or None."""
