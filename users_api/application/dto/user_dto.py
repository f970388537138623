"""
User DTO
========

Pydantic models for user API request bodies.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from users_api.domain.models.user import User


class UserCreateRequest(BaseModel):
    """DTO for creating a user. Name, dob and address are required."""
    name: str = Field(..., description="Full name")
    dob: str = Field(..., description="Date of birth, free-form")
    address: str = Field(..., description="Postal address")
    description: Optional[str] = Field(None, description="Optional description")
    
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "John Doe",
                "dob": "1/2/3",
                "address": "1 Singapore Road",
                "description": "test create",
            }
        }
    )
    
    def to_user(self) -> User:
        return User(
            name=self.name,
            dob=self.dob,
            address=self.address,
            description=self.description,
        )


class UserUpdateRequest(BaseModel):
    """DTO for a partial update. Only the fields sent are changed."""
    name: Optional[str] = None
    dob: Optional[str] = None
    address: Optional[str] = None
    description: Optional[str] = None
    
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "address": "2 Singapore Road",
            }
        }
    )
    
    def to_user(self) -> User:
        return User(
            name=self.name,
            dob=self.dob,
            address=self.address,
            description=self.description,
        )
