from django.apps import AppConfig, apps
from django.conf import settings


class StorageConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.storage"

    provider = None

    def ready(self):
        self.reset()

    def reset(self):
        from apps.storage.factory import build_storage

        self.provider = build_storage(settings.STORAGE_PROVIDER)
        return self.provider


def get_storage():
    return apps.get_app_config("storage").provider
