import io

import pytest
import logging

from pathlib import Path
from dulwich import porcelain

from jago.config import ConfigAccessor


@pytest.fixture
def capture_logs():
    """Fixture to capture log output during tests."""
    log_stream = io.StringIO()
    handler = logging.StreamHandler(log_stream)
    logger = logging.getLogger("jago")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    yield log_stream  # Yield the stream to the test function

    # Cleanup after the test
    logger.removeHandler(handler)
    log_stream.close()


@pytest.fixture
def empty_config(tmp_path, monkeypatch) -> ConfigAccessor:
    """Replace the global configuration with one backed by an empty file."""
    accessor = ConfigAccessor(tmp_path / "config" / "jago.cfg")
    monkeypatch.setattr("jago.config.config", accessor)
    return accessor


# git fixtures


@pytest.fixture
def source_repo(tmp_path) -> Path:
    """A local git repository with a single commit."""
    repo_path = tmp_path / "source"
    repo_path.mkdir()
    repo = porcelain.init(str(repo_path))

    readme = repo_path / "README.md"
    readme.write_text("# project\n")
    porcelain.add(repo, paths=[str(readme)])
    porcelain.commit(
        repo,
        message=b"Initial commit",
        author=b"Test User <test@example.com>",
        committer=b"Test User <test@example.com>",
    )
    repo.close()
    return repo_path
