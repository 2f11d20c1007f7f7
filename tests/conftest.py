import pytest
from unittest.mock import AsyncMock, MagicMock

from account_lifecycle.browser_engine import BrowserEngine
from account_lifecycle.config import ScenarioConfig
from account_lifecycle.identity import generate_identity
from account_lifecycle.reporter import ConsoleReporter
from account_lifecycle.scenario import AccountLifecycleScenario

ACCOUNT_URL = 'https://magento.softwaretestingboard.com/customer/account/'


class Visibility:
    """Answers page.is_visible() per selector.

    A value is either a bool or a list of bools consumed one call at a time
    (the last entry repeats). Unknown selectors are visible.
    """

    def __init__(self):
        self.answers = {}
        self.calls = []

    def set(self, selector, value):
        self.answers[selector] = value
        return self

    def __call__(self, selector, *args, **kwargs):
        self.calls.append(selector)
        value = self.answers.get(selector, True)
        if isinstance(value, list):
            return value.pop(0) if len(value) > 1 else value[0]
        return value


@pytest.fixture
def config():
    return ScenarioConfig()


@pytest.fixture
def selectors(config):
    return config.selectors


@pytest.fixture
def identity():
    return generate_identity(timestamp_ms=1700000000000)


@pytest.fixture
def visibility():
    return Visibility()


@pytest.fixture
def page(visibility):
    """Playwright page mock that lands on the account area"""
    page = AsyncMock()
    page.url = ACCOUNT_URL
    page.on = MagicMock()
    page.is_visible.side_effect = visibility
    return page


@pytest.fixture
def engine(page):
    engine = AsyncMock(spec=BrowserEngine)
    engine.new_page.return_value = page
    return engine


@pytest.fixture
def scenario(config, engine, identity):
    return AccountLifecycleScenario(
        config=config,
        engine=engine,
        reporter=ConsoleReporter(),
        identity=identity
    )
