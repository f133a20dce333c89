"""
User schemas untuk Token Auth API.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class UserResponse(BaseModel):
    """
    User representation yang dikembalikan ke client.
    Password hash tidak termasuk.
    """
    id: int
    name: str
    email: str
    age: int
    city: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "John Doe",
                "email": "john@example.com",
                "age": 25,
                "city": "New York",
                "created_at": "2024-01-15T10:00:00Z",
                "updated_at": "2024-01-15T10:00:00Z"
            }
        }
    )
