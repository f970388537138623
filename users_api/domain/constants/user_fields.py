"""Constants for User document field names"""


class UserFields:
    """Field name constants for the users collection"""
    NAME = "name"
    DOB = "dob"
    ADDRESS = "address"
    DESCRIPTION = "description"
    CREATED_AT = "createdAt"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
