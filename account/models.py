from django.conf import settings
from django.db import models


class UserProfile(models.Model):
    """
    Per-account fields the stock auth user does not carry.

    ``init`` keeps the email address the account was first set up with and
    is never changed after installation.
    """
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="profile",
    )
    timezone = models.CharField(max_length=64, blank=True, default="")
    init = models.EmailField(blank=True, default="")

    def __str__(self):
        return f"Profile: {self.user}"
