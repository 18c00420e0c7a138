import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path so `import slide_compiler` works
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from slide_compiler.models import EXAMPLE_SLIDE_DECK  # noqa: E402


@pytest.fixture
def example_deck():
    """Fresh deep copy of the reference IR deck."""
    import copy
    return copy.deepcopy(EXAMPLE_SLIDE_DECK)
