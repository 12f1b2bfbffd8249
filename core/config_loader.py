from typing import List, Optional, Dict
from pydantic import BaseModel, Field


class ScoringConfig(BaseModel):
    """
    Point values for the compatibility scorer.

    Defaults reproduce the production weighting:
    10 per matching skill, 20 for location, 15 for availability.
    """
    skill_points: int = Field(default=10, ge=0)
    location_points: int = Field(default=20, ge=0)
    availability_points: int = Field(default=15, ge=0)

    # Tokens in a date-list availability meaning "always available"
    always_available_tokens: List[str] = Field(
        default_factory=lambda: ['any', 'all', 'flexible', 'everyday', 'daily']
    )


class MatchingConfig(BaseModel):
    """
    Top-level matching configuration.

    With the default min_score of 1 every candidate scoring above zero is
    suggested. Raising min_score deliberately narrows that: candidates with
    a positive score below the threshold are dropped as well.
    """
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)

    # Result policy for event -> volunteers suggestions
    top_k: Optional[int] = Field(default=None, ge=1)  # None = return every candidate
    min_score: int = Field(default=1, ge=1)  # Overrides the score > 0 rule when set above 1


class NotificationChannelConfig(BaseModel):
    """Configuration for a single notification channel."""
    enabled: bool = True
    recipient: Optional[str] = None  # Webhook URL, etc. Falls back to the volunteer id


class NotificationConfig(BaseModel):
    """
    Configuration for notifications.

    Controls whether volunteers are told about assignments and removals.
    """
    enabled: bool = False  # Disabled by default - must opt-in

    notify_on_assignment: bool = True
    notify_on_removal: bool = True

    # Channels to use, keyed by channel type (webhook, in_app, ...)
    channels: Dict[str, NotificationChannelConfig] = Field(default_factory=dict)

    # Base URL for links in notifications
    base_url: str = "http://localhost:8080"

