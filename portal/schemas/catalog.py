"""Catalog breadcrumb schemas."""

from pydantic import BaseModel


class BreadcrumbResponse(BaseModel):
    """Id and display name used by agent portal breadcrumbs."""

    id: str
    name: str
