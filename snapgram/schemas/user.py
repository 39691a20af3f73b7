from .base import BaseSchema


class CurrentUser(BaseSchema):
    """Identity of the acting user, supplied by the session layer."""
    id: str
    name: str
