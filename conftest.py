# Ensure project root is on sys.path so 'layered_templates' is importable when running
# pytest from environments that don't install the package.
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).parent.resolve()
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def restore_event_catalog():
    """Reload the bundled event catalog after each test that swaps it out."""
    yield
    from layered_templates.logs.event_catalog import reload_event_templates

    reload_event_templates()
