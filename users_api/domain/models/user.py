"""
User Model
==========

Domain model representing a user in the system.

Every field is independently present or absent. Absent fields are left out
of both the JSON body and the stored document, never written as null. This
is what lets an update carry only the fields the caller wants to change.
"""
from typing import Any, Dict, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field

from users_api.domain.constants.user_fields import UserFields


class User(BaseModel):
    """
    User domain model.
    
    ``id`` holds the hex form of the store-assigned ObjectId and
    ``created_at`` the ISO 8601 UTC creation time; both are set by the
    service, never by the caller.
    """
    model_config = ConfigDict(populate_by_name=True)
    
    id: Optional[str] = None
    name: Optional[str] = None
    dob: Optional[str] = None
    address: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    
    def to_json(self) -> Dict[str, Any]:
        """Wire representation with absent fields omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)
    
    def to_document(self) -> Dict[str, Any]:
        """Convert to a MongoDB document, omitting absent fields."""
        doc = self.model_dump(by_alias=True, exclude_none=True, exclude={"id"})
        if self.id is not None:
            doc[UserFields.MONGO_ID] = ObjectId(self.id)
        return doc
    
    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "User":
        """Convert a MongoDB document to a User."""
        doc = dict(doc)  # Make a copy to avoid modifying original
        mongo_id = doc.pop(UserFields.MONGO_ID, None)
        if mongo_id is not None:
            doc["id"] = str(mongo_id)
        return cls.model_validate(doc)
