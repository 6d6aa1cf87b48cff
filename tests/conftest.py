import pytest
from click.testing import CliRunner

MULTI_PARAGRAPH_MESSAGE = """fix: prevent racing of requests

Introduce a request id and a reference to latest request. Dismiss
incoming responses other than from latest request.

Remove timeouts which were used to mitigate the racing issue but are
obsolete now.

Reviewed-by: Z
Refs: #123"""


@pytest.fixture
def cli_runner():
    """Fixture for testing CLI commands."""
    return CliRunner()


@pytest.fixture
def multi_paragraph_message():
    """A commit with a two-paragraph body followed by two footers."""
    return MULTI_PARAGRAPH_MESSAGE


@pytest.fixture
def clean_environment(monkeypatch):
    """Remove any config overrides set in the environment."""
    for name in (
        "CONVENTIONAL_CHECK_COLOR",
        "CONVENTIONAL_CHECK_ALWAYS_LOG",
        "CONVENTIONAL_CHECK_LOG_FILE",
        "CONVENTIONAL_CHECK_LOG_DIRECTORY",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
