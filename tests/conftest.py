"""Pytest fixtures for CDK construct tests."""

from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
  """Create a local site folder with a home page and a 404 page."""
  dist = tmp_path / "dist"
  dist.mkdir()
  (dist / "home.html").write_text("<h1>Home</h1>\n")
  (dist / "404.html").write_text("<h1>Not found</h1>\n")
  return dist


@pytest.fixture
def in_project_root(monkeypatch: pytest.MonkeyPatch) -> Path:
  """Run the test from the project root so ./www resolves."""
  monkeypatch.chdir(PROJECT_ROOT)
  return PROJECT_ROOT
