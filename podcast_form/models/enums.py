"""Enumerations for the podcast contribution form."""

from enum import Enum


class Category(str, Enum):
    """Topic category a contribution is filed under."""

    MOBILE_DE_ADDICTION = "mobile-de-addiction"
    PERFORMANCE_ADDICTION = "performance-addiction"
    SOCIAL_MEDIA_DE_ADDICTION = "social-media-de-addiction"
    ENTERTAINMENT_DE_ADDICTION = "entertainment-de-addiction"
    WHATSAPP_ETIQUETTE = "whatsapp-etiquette"

    @property
    def label(self) -> str:
        """Human readable label shown in the category picker."""
        return _CATEGORY_LABELS[self]


_CATEGORY_LABELS = {
    Category.MOBILE_DE_ADDICTION: "Mobile De-Addiction",
    Category.PERFORMANCE_ADDICTION: "Performance Addiction",
    Category.SOCIAL_MEDIA_DE_ADDICTION: "Social Media De-Addiction",
    Category.ENTERTAINMENT_DE_ADDICTION: "Entertainment De-Addiction",
    Category.WHATSAPP_ETIQUETTE: "Whatsapp Etiquette",
}


class SubmitState(str, Enum):
    """Lifecycle state of the submission controller."""

    IDLE = "idle"
    SUBMITTING = "submitting"


class SubmissionStatus(str, Enum):
    """Result of a single submit attempt."""

    SUCCEEDED = "succeeded"
    REJECTED = "rejected"  # Server answered with success=false
    FAILED = "failed"  # Transport level failure
    BLOCKED = "blocked"  # Gate closed, nothing was sent
