from typing import Dict

from pydantic import BaseModel, Field

ADMIN_ROLES = ("SUPER_ADMIN", "ADMIN")


class CurrentUser(BaseModel):
    """Caller identity taken from the access token. Used only for RBAC checks."""

    id: str
    role: str
    permissions: Dict[str, Dict[str, bool]] = Field(default_factory=dict)

    @property
    def is_admin(self) -> bool:
        return self.role in ADMIN_ROLES

    def can(self, module: str, action: str) -> bool:
        """Admins may do everything; other roles need the module/action grant in their token."""
        if self.is_admin:
            return True
        return bool(self.permissions.get(module, {}).get(action, False))
