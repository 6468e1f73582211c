from django.db import models


class StateEntry(models.Model):
    """
    Key/value store for one-shot bootstrap flags such as ``install_time``.
    """
    key = models.CharField(max_length=100, unique=True)
    value = models.JSONField(null=True, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "installer_state"
        ordering = ["key"]

    def __str__(self):
        return self.key
