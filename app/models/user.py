from mongoengine import BooleanField, DateTimeField, EmailField, StringField
from app.models.base import BaseDocument, utcnow


# Never serialized back to clients
PRIVATE_FIELDS = ("password", "reset_password_token", "reset_password_expires_at")


class User(BaseDocument):
    """User document.

    Fields:
    - name (str): Display name
    - email (EmailStr, unique): Login identifier
    - password (str, hashed): Bcrypt-hashed password
    - is_verified (bool): Set once the emailed verification code is consumed
    - verification_token / verification_token_expires_at: 6-digit code, 24h
    - reset_password_token / reset_password_expires_at: hex token, 1h
    - last_login (datetime): Updated on every successful login
    """
    name = StringField(required=True, null=False)
    password = StringField(required=True, null=False)
    email = EmailField(required=True, null=False, unique=True, allow_utf8_user=True)
    is_verified = BooleanField(required=True, null=False, default=False)
    last_login = DateTimeField(default=utcnow, null=False)

    verification_token = StringField(null=True)
    verification_token_expires_at = DateTimeField(null=True)
    reset_password_token = StringField(null=True)
    reset_password_expires_at = DateTimeField(null=True)

    meta = {
        "collection": "users",
        "indexes": [
            {"fields": ["email"], "unique": True},
            {"fields": ["verification_token"], "sparse": True},
            {"fields": ["reset_password_token"], "sparse": True},
        ],
    }

    def to_output(self, fields=None, exclude=None):
        exclude = list(exclude or []) + list(PRIVATE_FIELDS)
        return super().to_output(fields=fields, exclude=exclude)

    def clear_verification(self) -> None:
        self.verification_token = None
        self.verification_token_expires_at = None

    def clear_reset(self) -> None:
        self.reset_password_token = None
        self.reset_password_expires_at = None
