# installer/services/account.py
import logging
import time

from django.contrib.auth import get_user_model
from django.db import transaction

from account.models import UserProfile
from installer.services.state import StateStore
from installer.validators import validate_username

logger = logging.getLogger(__name__)

ADMIN_ACCOUNT_ID = 1
INSTALL_TIME_KEY = "install_time"


class AccountStore:
    """Loads and saves a user together with its profile row."""

    def load(self, pk=ADMIN_ACCOUNT_ID):
        User = get_user_model()
        user = User.objects.get(pk=pk)
        UserProfile.objects.get_or_create(user=user)
        return user

    def save(self, account):
        with transaction.atomic():
            account.save()
            account.profile.save()


class AccountFinalizer:
    """
    Applies the submitted site maintenance account to the placeholder user.
    """

    def __init__(self, account_store=None, state_store=None, clock=time.time):
        self.account_store = account_store or AccountStore()
        self.state_store = state_store or StateStore()
        self.clock = clock

    def finalize(self, account, submitted):
        name = submitted["name"]
        validate_username(name)

        # We precreated user 1 with placeholder values. Save the real ones.
        account.email = submitted["mail"]
        account.profile.init = submitted["mail"]
        account.groups.set(list(account.groups.all()))
        account.is_active = True
        account.profile.timezone = submitted.get("timezone") or ""
        account.set_password(submitted["password"])
        account.username = name
        self.account_store.save(account)
        logger.info("Site maintenance account %s (id=%s) configured", name, account.pk)

        install_time = int(self.clock())
        if self.state_store.set_once(INSTALL_TIME_KEY, install_time):
            logger.info("Recorded install_time=%s", install_time)
        return account
