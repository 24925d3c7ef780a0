"""Per-request context carrying the authenticated caller."""

from dataclasses import dataclass
from typing import Optional, TypeVar

from components.core.errors import Forbidden, NotFound

ResourceT = TypeVar("ResourceT")


@dataclass(frozen=True)
class RequestContext:
    """Identity of the caller, built from the bearer token for each request."""
    user_id: int

    def owns(self, resource) -> bool:
        return getattr(resource, "user_id", None) == self.user_id

    def authorize(self, resource: Optional[ResourceT], name: str = "Resource") -> ResourceT:
        """
        Return the resource if the caller may mutate it.

        Raises NotFound when it does not exist and Forbidden when it belongs
        to another user.
        """
        if resource is None:
            raise NotFound(f"{name} not found")
        if not self.owns(resource):
            raise Forbidden()
        return resource
