"""
PetDemo: Dog Request/Response Schemas
=====================================
"""

from pydantic import BaseModel, Field


class DogResponse(BaseModel):
    """
    Returned by POST /setDogName (201) and POST /searchDogName, and used as
    the lean row rendered by page4.

    Example:
        {"name": "Rex", "breed": "Beagle", "age": 4}
    """
    name: str = Field(description="Dog name")
    breed: str = Field(description="Dog breed")
    age: int = Field(description="Age in years")

    model_config = {"from_attributes": True}
