"""Mock implementations for testing and development."""

from .data import create_mock_mentions, create_mock_records
from .services import MockDirectory, MockMentionStore

__all__ = ["MockDirectory", "MockMentionStore", "create_mock_mentions", "create_mock_records"]
