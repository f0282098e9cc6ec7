# src/swap_agent/journal/settings.py
"""Settings for the journal module."""
from pydantic import BaseModel


class JournalSettings(BaseModel):
    """Configuration settings for the authorization journal.

    Attributes:
        enabled: Whether authorizations are journaled.
        data_dir: Directory for daily authorization JSON files.
        nonce_file: File holding the persisted nonce high-water mark.
    """

    enabled: bool = True
    data_dir: str = "data/authorizations"
    nonce_file: str = "data/nonce.json"
