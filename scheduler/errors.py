class SchedulerError(Exception):
    """Base class for review scheduling failures."""

    status_code = 500
    retryable = False


class ItemNotFound(SchedulerError):
    status_code = 404

    def __init__(self, item_id):
        self.item_id = item_id
        super().__init__(f"Review item not found: {item_id}")


class ReviewConflict(SchedulerError):
    """Another review of the same item won the race; retry the whole call."""

    status_code = 409
    retryable = True

    def __init__(self, item_id):
        self.item_id = item_id
        super().__init__(f"Review item {item_id} was modified concurrently, retry")


class InvalidRating(SchedulerError, ValueError):
    status_code = 400

    def __init__(self, rating):
        self.rating = rating
        super().__init__(f"Rating must be one of 1, 2, 3, 4 (got {rating!r})")
