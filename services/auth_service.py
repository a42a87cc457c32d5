"""
Auth Service - login and the forgot/reset password flow
"""

import logging
import secrets
from datetime import datetime, timedelta

from pymongo.database import Database

from adapters import mail_adapter
from app.config import settings
from app.exceptions import ServiceError, ServiceValidationError
from core.security import PasswordHasher, TokenService
from domain.mappers import UserMapper
from repositories import UserRepository

logger = logging.getLogger("foodorder.auth")

RESET_SUBJECT = "Password Reset Request"


class AuthService:
    @staticmethod
    def login(
        db: Database,
        email: str,
        password: str,
        hasher: PasswordHasher,
        tokens: TokenService,
    ) -> dict:
        """
        Check credentials and issue an access token.

        Unknown email and wrong password produce the same error so callers
        cannot probe which accounts exist.
        """
        user = UserRepository(db).get_by_email(email)
        if not user or not hasher.verify(password, user.get("password")):
            logger.info("login_failed reason=invalid_credentials")
            raise ServiceValidationError("Invalid Credentials")

        token = tokens.create_access_token(str(user["_id"]))
        logger.info(f"login_succeeded user_id={user['_id']}")
        return {
            "message": "Login Successfully",
            "statusCode": 200,
            "token": token,
            "user": UserMapper.to_login_summary(user),
        }

    @staticmethod
    def forgot_password(db: Database, email: str, reset_base_url: str) -> None:
        """
        Store a one-time reset token on the user and mail the reset link.

        Raises:
            ServiceValidationError: no user with this email
            ServiceError: the mail relay rejected the message
        """
        repo = UserRepository(db)
        user = repo.get_by_email(email)
        if not user:
            raise ServiceValidationError("No user found with this email address")

        token = secrets.token_hex(20)
        expires_at = datetime.utcnow() + timedelta(
            minutes=settings.password_reset_expire_minutes
        )
        repo.set_reset_token(user["_id"], token, expires_at)

        reset_url = f"{reset_base_url.rstrip('/')}/reset-password/{token}"
        body = (
            "You are receiving this because you (or someone else) have requested "
            "the reset of the password for your account.\n\n"
            "Please click on the following link, or paste it into your browser "
            "to complete the process:\n\n"
            f"{reset_url}\n\n"
            "If you did not request this, please ignore this email and your "
            "password will remain unchanged.\n"
        )
        if not mail_adapter.send_mail(user["email"], RESET_SUBJECT, body):
            raise ServiceError("Error sending email")
        logger.info(f"password_reset_requested user_id={user['_id']}")

    @staticmethod
    def reset_password(
        db: Database, token: str, new_password: str, hasher: PasswordHasher
    ) -> dict:
        repo = UserRepository(db)
        user = repo.get_by_reset_token(token, datetime.utcnow())
        if not user:
            raise ServiceValidationError("Invalid or expired reset token")

        repo.replace_password(user["_id"], hasher.hash(new_password))
        logger.info(f"password_reset_completed user_id={user['_id']}")
        return {
            "message": "Password successfully updated",
            "confirmation": "Your password has been changed. You can now log in with the new password.",
        }
