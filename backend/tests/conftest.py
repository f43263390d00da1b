from pathlib import Path
from unittest.mock import MagicMock

from dotenv import load_dotenv
import pytest

# Load environment variables for tests before the app reads settings
load_dotenv(Path(__file__).resolve().parents[1] / ".env.test")


# Keep quote-request notifications out of API tests
@pytest.fixture(autouse=True)
def patch_quote_notifications(monkeypatch):
    """Replace the post-submit notification task with a MagicMock."""
    mock = MagicMock()
    monkeypatch.setattr("app.api.api_quote.notify_new_quote_request", mock)
    return mock
