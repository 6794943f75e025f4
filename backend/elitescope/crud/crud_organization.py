"""CRUD operations for organizations."""

from elitescope.crud._base import CRUDBase
from elitescope.models.organization import Organization


class CRUDOrganization(CRUDBase[Organization]):
    """CRUD operations for organizations."""

    text_columns = ("name", "description")
    order_by = (Organization.name.asc(),)


organization = CRUDOrganization(Organization)
