import pytest

from metarconv.i18n import Messages


@pytest.fixture
def messages() -> Messages:
    return Messages("en")
