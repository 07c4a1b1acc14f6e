"""DTOs for catalog lookups (breadcrumb labels)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BreadcrumbResult:
    """Id and display name of one breadcrumb segment (product or subcategory)."""

    id: str
    name: str
