"""
Tuning for the swipe client.

Platform differences (smaller batches and longer timeouts on constrained
devices) are expressed as presets of one record injected into the deck
hydrator and the swipe session, instead of branching on the platform.
"""

from pydantic import BaseModel, ConfigDict, Field


class DeckConfig(BaseModel):
    """Deck hydration and swipe session tuning."""

    model_config = ConfigDict(frozen=True)

    batch_size: int = Field(default=5, ge=1, description="Concurrent detail fetches per batch")
    per_item_timeout_ms: int = Field(default=10_000, gt=0, description="First-attempt timeout per item")
    inter_batch_delay_ms: int = Field(default=150, ge=0, description="Pause between batches")
    refetch_threshold: int = Field(default=3, ge=0, description="Items left before extending the deck")
    settle_delay_ms: int = Field(default=300, ge=0, description="Input lock held after a swipe settles")
    deck_size: int = Field(default=15, ge=1, le=50, description="Candidate IDs requested per load")
    refetch_debounce_ms: int = Field(default=0, ge=0, description="Delay before a deck extension starts")
    cache_ttl_seconds: int = Field(default=4 * 60 * 60, ge=0, description="Hydration cache lifetime")

    @classmethod
    def default(cls) -> "DeckConfig":
        return cls()

    @classmethod
    def constrained(cls) -> "DeckConfig":
        """Preset for resource-constrained devices."""
        return cls(
            batch_size=3,
            per_item_timeout_ms=15_000,
            inter_batch_delay_ms=300,
            refetch_threshold=2,
            settle_delay_ms=300,
            deck_size=10,
            refetch_debounce_ms=500,
        )

    @property
    def per_item_timeout(self) -> float:
        return self.per_item_timeout_ms / 1000

    @property
    def inter_batch_delay(self) -> float:
        return self.inter_batch_delay_ms / 1000

    @property
    def settle_delay(self) -> float:
        return self.settle_delay_ms / 1000

    @property
    def refetch_debounce(self) -> float:
        return self.refetch_debounce_ms / 1000
