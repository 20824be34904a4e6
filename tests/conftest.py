import io

import pytest
from rich.console import Console


@pytest.fixture
def console():
    """A Rich Console that records into a string buffer (read via console.file.getvalue())."""
    return Console(file=io.StringIO(), width=120, color_system=None)
