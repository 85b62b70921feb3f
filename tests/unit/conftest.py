"""Mark every helper test under `tests/unit/` as `unit`.

Run just these with ``pytest -m unit``.
"""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

UNIT_DIR = Path(__file__).parent.resolve()


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Tag collected helper tests with `unit` unless already marked."""
    for item in items:
        if UNIT_DIR not in item.path.resolve().parents:
            continue
        if item.get_closest_marker("unit") is None:
            item.add_marker(pytest.mark.unit)
