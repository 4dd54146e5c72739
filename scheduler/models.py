# Django discovers models through this module; they live in data/.
from .data.models import ReviewItem  # noqa: F401
