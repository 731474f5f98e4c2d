"""
User entity.

A registered user of the tracker. Created once per unique username and
never modified afterwards.
"""

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """
    A registered user.

    Examples:
        >>> user = User(id="6f1c1b6e-7c57-4f4e-9d55-1a1f6b0f5e2a", username="ada")
        >>> user.to_summary()
        {'id': '6f1c1b6e-7c57-4f4e-9d55-1a1f6b0f5e2a', 'username': 'ada'}
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Store-generated identifier")
    username: str = Field(..., min_length=1, description="Unique username")

    def to_summary(self) -> dict:
        """Public ``{id, username}`` view."""
        return {"id": self.id, "username": self.username}
