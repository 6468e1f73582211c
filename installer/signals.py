from django.db.models.signals import post_migrate
from django.dispatch import receiver

from installer.services.bootstrap import ensure_placeholder_admin


@receiver(post_migrate)
def create_placeholder_admin(sender, **kwargs):
    """
    Create the placeholder user 1 after migrations.
    """
    # only once, for the installer app itself
    if sender.name != "installer":
        return

    ensure_placeholder_admin()
