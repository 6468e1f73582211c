from django.db import models


class SetupState(models.Model):
    STEP_STAGING = 1
    STEP_SITE = 2
    STEP_CHOICES = [
        (STEP_STAGING, "Configuration import location"),
        (STEP_SITE, "Configure site"),
    ]

    is_completed = models.BooleanField(default=False)
    completed_at = models.DateTimeField(null=True, blank=True)
    current_step = models.PositiveSmallIntegerField(choices=STEP_CHOICES, default=STEP_STAGING)

    # staging directory chosen on step 1 (informational, settings file is authoritative)
    staging_directory = models.CharField(max_length=255, blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "installer_setup_state"

    def __str__(self):
        return f"Setup step {self.current_step} ({'done' if self.is_completed else 'pending'})"
