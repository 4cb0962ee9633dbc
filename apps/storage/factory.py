import logging

from django.core.exceptions import ImproperlyConfigured

from apps.storage.base import StorageProvider
from apps.storage.database import DatabaseStorage
from apps.storage.memory import MemoryStorage

logger = logging.getLogger(__name__)

PROVIDERS = {
    MemoryStorage.name: MemoryStorage,
    DatabaseStorage.name: DatabaseStorage,
}


def build_storage(provider_name: str) -> StorageProvider:
    try:
        provider_class = PROVIDERS[provider_name]
    except KeyError as err:
        choices = ", ".join(sorted(PROVIDERS))
        raise ImproperlyConfigured(f"Unknown STORAGE_PROVIDER {provider_name!r}; expected one of: {choices}") from err

    logger.info(f"Using storage provider: {provider_class.__name__}")
    return provider_class()
