import logging

from django.contrib.auth import get_user_model
from django.contrib.auth.models import Group

from account.models import UserProfile
from installer.services.account import ADMIN_ACCOUNT_ID
from installer.services.setup import get_setup_state

logger = logging.getLogger(__name__)

ADMIN_GROUP = "Administrators"
PLACEHOLDER_USERNAME = "placeholder"


def ensure_placeholder_admin():
    """
    Pre-create user 1 with placeholder values; the site configure form fills
    in the real credentials. Returns the user, or None if it already existed.
    """
    User = get_user_model()
    if User.objects.filter(pk=ADMIN_ACCOUNT_ID).exists():
        return None

    get_setup_state()

    user = User(
        pk=ADMIN_ACCOUNT_ID,
        username=PLACEHOLDER_USERNAME,
        email="",
        is_active=False,
        is_staff=True,
        is_superuser=True,
    )
    user.set_unusable_password()
    user.save()

    group, _ = Group.objects.get_or_create(name=ADMIN_GROUP)
    user.groups.add(group)
    UserProfile.objects.get_or_create(user=user)

    logger.info("Created placeholder admin account id=%s", user.pk)
    return user
