from apps.storage.apps import get_storage


class StorageMixin:
    """
    Gives a view access to the storage provider.

    A provider passed through ``as_view(storage=...)`` wins; otherwise the one
    built at startup by the storage app is used.
    """

    storage = None

    def get_storage(self):
        return self.storage or get_storage()
