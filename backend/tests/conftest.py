"""
Pytest configuration and shared fixtures for analyzer tests.
"""

import pytest
import sys
from pathlib import Path

# Add backend app to path
sys.path.insert(0, str(Path(__file__).parent.parent / "app"))

from analyzer.core.document import Document  # noqa: E402


# ==================== Document Fixtures ====================

@pytest.fixture
def make_document():
    """Factory that parses markup into a Document."""
    def _make(html: str) -> Document:
        return Document.from_html(html)
    return _make


@pytest.fixture
def login_page_html() -> str:
    """A small login form with a mix of ids, classes and test attributes."""
    return """
    <html>
      <body>
        <form id="login-form" class="auth-form">
          <input id="user_name" name="username" type="text">
          <input id="password" name="password" type="password">
          <button class="btn btn-primary" data-testid="login-submit">Log in</button>
        </form>
        <ul id="menu">
          <li class="menu-card">Home</li>
          <li class="menu-card">Products</li>
          <li class="menu-card">Contact</li>
          <li class="menu-card">About</li>
        </ul>
      </body>
    </html>
    """


# ==================== Storage Fixtures ====================

@pytest.fixture
def mappings_dir(tmp_path):
    """Create a temporary mapping store directory for tests."""
    data_dir = tmp_path / "data" / "selector_mappings"
    data_dir.mkdir(parents=True)
    return data_dir
