"""
Pydantic model for user data.

A single model is used for request bodies, response bodies and the
records returned by the persistence layer: the resource is small and
the API exchanges full records only (updates replace every field).
"""

from uuid import UUID

from pydantic import BaseModel, Field


class User(BaseModel):
    """A user record.

    ``id`` is assigned by the caller and is never generated by the
    store.
    """

    id: UUID = Field(..., example="0bd7888d-28e0-4f99-be78-bc4987c4ba9c")
    name: str = Field(..., example="Jane Doe")
    email: str = Field(..., example="jane.doe@example.com")

    model_config = {
        "from_attributes": True,
    }
