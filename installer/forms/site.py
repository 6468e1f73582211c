import zoneinfo

from django import forms
from django.conf import settings

from installer.services.account import AccountFinalizer, AccountStore
from installer.validators import username_max_length, validate_username


def timezone_choices():
    return [(tz, tz.replace("_", " ")) for tz in sorted(zoneinfo.available_timezones())]


class SiteConfigureForm(forms.Form):
    name = forms.CharField(
        label="Username",
        help_text="Spaces are allowed; punctuation is not allowed except for periods, hyphens, and underscores.",
        widget=forms.TextInput(attrs={"class": "form-control form-control-sm username"}),
    )
    mail = forms.EmailField(
        label="Email address",
        widget=forms.EmailInput(attrs={"class": "form-control form-control-sm"}),
    )
    password1 = forms.CharField(label="Password", widget=forms.PasswordInput(attrs={"size": 25}))
    password2 = forms.CharField(label="Confirm password", widget=forms.PasswordInput(attrs={"size": 25}))
    timezone = forms.ChoiceField(label="Default time zone", choices=timezone_choices)

    def __init__(self, *args, account_store=None, finalizer=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["name"].widget.attrs["maxlength"] = str(username_max_length())
        self.fields["timezone"].initial = settings.TIME_ZONE
        self.account_store = account_store or AccountStore()
        self.finalizer = finalizer or AccountFinalizer(account_store=self.account_store)

    def clean_name(self):
        name = self.cleaned_data["name"]
        validate_username(name)
        return name

    def clean(self):
        cleaned = super().clean()
        p1 = cleaned.get("password1")
        p2 = cleaned.get("password2")
        if p1 and p2 and p1 != p2:
            self.add_error("password2", "The specified passwords do not match.")
        return cleaned

    def save(self):
        account = self.account_store.load()
        return self.finalizer.finalize(account, {
            "name": self.cleaned_data["name"],
            "mail": self.cleaned_data["mail"],
            "password": self.cleaned_data["password1"],
            "timezone": self.cleaned_data["timezone"],
        })
