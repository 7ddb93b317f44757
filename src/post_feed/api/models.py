"""
API Models

Records decoded from the posts endpoint.
"""

from pydantic import BaseModel, ConfigDict, Field


class Post(BaseModel):
    """Represents a post from the API."""
    model_config = ConfigDict(frozen=True, strict=True, populate_by_name=True)

    user_id: int = Field(alias="userId")
    id: int
    title: str
    body: str

    def format_line(self) -> str:
        """Format the post as a single list row."""
        return f"{self.user_id:>3} | {self.id:>4} | {self.title}"
