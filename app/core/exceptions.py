class StoreNotFoundError(Exception):
    """Raised when a store id does not resolve to an existing record."""

    def __init__(self, store_id: str):
        self.store_id = store_id
        super().__init__(f"Store not found: {store_id}")
