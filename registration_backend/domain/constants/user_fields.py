"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    NAME = "name"
    EMAIL = "email"
    PASSWORD = "password"
    VERSION = "version"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
    MONGO_VERSION = "__v"

    # Fields a registration must carry, in reporting order
    REQUIRED = (NAME, EMAIL, PASSWORD)

    # Index names
    EMAIL_UNIQUE_INDEX = "email_1"
