"""
User domain mappers.
Handles transformation of stored user documents into response payloads.
"""

from domain.mappers.document_mapper import DocumentMapper

# Never leave the service boundary.
PRIVATE_USER_FIELDS = ("password", "resetPasswordToken", "resetPasswordExpire")


class UserMapper:
    """Mapper for user-related transformations."""

    @staticmethod
    def to_response(user: dict) -> dict:
        """
        Convert a user document to its public representation.

        Args:
            user: raw document from the `users` collection

        Returns:
            dict without password hash or reset token fields
        """
        return DocumentMapper.to_response(user, exclude=PRIVATE_USER_FIELDS)

    @staticmethod
    def to_login_summary(user: dict) -> dict:
        """Compact user block returned alongside a login token."""
        return {
            "id": str(user["_id"]),
            "userName": user.get("username"),
            "email": user.get("email"),
            "firstName": user.get("firstName"),
            "lastName": user.get("lastName"),
        }
