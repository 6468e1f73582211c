# installer/validators.py
import unicodedata

from django.conf import settings
from django.core.exceptions import ValidationError


USERNAME_PUNCTUATION = {" ", ".", "-", "_"}


def username_max_length():
    return getattr(settings, "USERNAME_MAX_LENGTH", 60)


def validate_username(name):
    """
    Letters, digits, spaces and only periods, hyphens and underscores as
    punctuation. Raises ValidationError(code="invalid_name").
    """
    if not name:
        raise ValidationError("You must enter a username.", code="invalid_name")

    # combining marks are not alphanumeric on their own
    name = unicodedata.normalize("NFC", name)
    for ch in name:
        if not (ch.isalnum() or ch in USERNAME_PUNCTUATION):
            raise ValidationError(
                "The username contains an illegal character: %(char)r.",
                code="invalid_name",
                params={"char": ch},
            )

    max_length = username_max_length()
    if len(name) > max_length:
        raise ValidationError(
            "The username %(name)s is too long: it must be %(max)s characters or less.",
            code="invalid_name",
            params={"name": name, "max": max_length},
        )
