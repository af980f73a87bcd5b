from datetime import date

import pytest

from solar_fakes import fixed_provider


@pytest.fixture
def provider():
    return fixed_provider()


@pytest.fixture
def wednesday() -> date:
    return date(2024, 6, 5)
