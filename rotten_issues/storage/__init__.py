"""Local storage for data kept between runs."""

from .counter import DEFAULT_COUNTER_FILE, CounterStore

__all__ = ["CounterStore", "DEFAULT_COUNTER_FILE"]
