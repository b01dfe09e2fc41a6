"""Protocol for user settings persistence."""

from typing import Protocol

from lingocards.domain.learning.value_objects import RepetitionConfig


class SettingsRepositoryProtocol(Protocol):
    """Protocol for the repetition config and saved API key singletons."""

    def find_repetition_config(self) -> RepetitionConfig | None:
        """Get the stored repetition config, None when never saved."""
        ...

    def save_repetition_config(self, config: RepetitionConfig | None) -> bool:
        """Store the repetition config; None removes it."""
        ...

    def find_api_key(self) -> str | None:
        """Get the saved generator API key."""
        ...

    def save_api_key(self, api_key: str | None) -> bool:
        """Store the generator API key; None removes it."""
        ...
