#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bittenhumans.__main__ import main


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def run_cli(capsys):
    """Fixture to run the CLI with given arguments and return (exit_code, stdout lines)."""

    def _run(*argv: str) -> tuple[int, list[str]]:
        code = main(list(argv))
        return code, capsys.readouterr().out.splitlines()

    return _run
