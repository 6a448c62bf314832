"""
PetDemo: Cat Request/Response Schemas
=====================================

What:  Pydantic models for the cat JSON contract and the lean records
       handed to the list template.
Why:   The API exposes `beds`, the table stores `beds_owned`; these models
       are the single place that mapping is visible.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class CatResponse(BaseModel):
    """
    Returned by POST /setName (201), GET /searchName and POST /updateLast.

    Example:
        {"name": "Tom Cat", "beds": 3}
    """
    name: str = Field(description="Full cat name")
    beds: int = Field(description="Number of beds owned")


class CatNameResponse(BaseModel):
    """Returned by GET /getName: the most recently created cat's name."""
    name: str = Field(description="Name of the most recently created cat")


class CatRecord(BaseModel):
    """Lean cat row rendered by page1."""
    name: str
    beds: int
    created_date: datetime
