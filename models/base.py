"""
Base model classes.
"""

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """
    Base for every model that crosses the core's boundary.

    Collaborators build these from their own data, so unknown fields are
    dropped rather than rejected.
    """
    model_config = ConfigDict(
        validate_assignment=True,
        extra="ignore",
    )


class FrozenSchema(BaseSchema):
    """Immutable, hashable variant - usable as a dict key or set member."""
    model_config = ConfigDict(frozen=True)
