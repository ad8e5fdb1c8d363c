"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class AuthenticationError(Exception):
    """Raised when a username/password pair does not match any account."""

    def __init__(self, username: str):
        self.username = username
        super().__init__("Invalid username or password")


class NotAuthenticatedError(Exception):
    """Raised when an operation needs a session and none is active."""

    def __init__(self) -> None:
        super().__init__("Authentication required")


class PermissionDeniedError(Exception):
    """Raised at a call site when the acting user may not perform an action.

    The domain store never raises this itself; callers check first.
    """

    def __init__(self, module: str, action: str, resource_id: str | None = None):
        self.module = module
        self.action = action
        self.resource_id = resource_id
        target = f"{module} '{resource_id}'" if resource_id else module
        super().__init__(f"Not permitted to {action} {target}")
