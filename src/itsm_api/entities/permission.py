"""Permission codes checked by the handlers."""

from enum import Enum


class Permission(str, Enum):
    """Authorizable actions, identified by their permission code."""

    # Filiales
    FILIALES_CREATE = "filiales.create"
    FILIALES_VIEW = "filiales.view"
    FILIALES_VIEW_ALL = "filiales.view_all"
    FILIALES_UPDATE = "filiales.update"
    FILIALES_MANAGE = "filiales.manage"

    # Cross-feature: notification filtering needs the branch list
    NOTIFICATIONS_FILTER_BY_FILIALE = "notifications.filter_by_filiale"

    def __str__(self) -> str:
        return self.value
