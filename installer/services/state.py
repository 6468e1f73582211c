# installer/services/state.py
from django.conf import settings
from django.core.cache import cache

from installer.models.state import StateEntry


def _cache_key(key):
    return f"installer_state:{key.lower()}"


class StateStore:
    """
    Durable key/value state for one-shot bootstrap flags (``install_time``).
    """

    def __init__(self, ttl=None):
        self.ttl = settings.STATE_CACHE_TTL if ttl is None else ttl

    def get(self, key, default=None):
        if self.ttl:
            cached = cache.get(_cache_key(key))
            if cached is not None:
                return cached

        obj = StateEntry.objects.filter(key=key).first()
        if obj is None or obj.value is None:
            return default

        if self.ttl:
            cache.set(_cache_key(key), obj.value, self.ttl)
        return obj.value

    def set(self, key, value):
        StateEntry.objects.update_or_create(key=key, defaults={"value": value})
        cache.delete(_cache_key(key))

    def set_once(self, key, value):
        """Store ``value`` unless ``key`` already holds one. Returns True if written."""
        obj, created = StateEntry.objects.get_or_create(key=key, defaults={"value": value})
        if not created and obj.value is None:
            obj.value = value
            obj.save(update_fields=["value", "updated_at"])
            created = True
        if created:
            cache.delete(_cache_key(key))
        return created

    def delete(self, *keys):
        StateEntry.objects.filter(key__in=keys).delete()
        for key in keys:
            cache.delete(_cache_key(key))
