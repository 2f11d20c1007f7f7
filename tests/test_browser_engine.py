import logging
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from playwright.async_api import Error as PlaywrightError

from account_lifecycle.browser_engine import BrowserEngine
from account_lifecycle.config import ScenarioConfig


@pytest.fixture
def playwright_stack():
    """Mocked async_playwright() -> playwright -> browser -> context -> page"""
    page = AsyncMock()
    page.on = MagicMock()

    context = AsyncMock()
    context.new_page.return_value = page

    browser = AsyncMock()
    browser.new_context.return_value = context

    playwright = AsyncMock()
    playwright.chromium.launch.return_value = browser

    with patch('account_lifecycle.browser_engine.async_playwright') as mock_factory:
        mock_factory.return_value.start = AsyncMock(return_value=playwright)
        yield {
            "factory": mock_factory,
            "playwright": playwright,
            "browser": browser,
            "context": context,
            "page": page
        }


class TestBrowserEngine:
    """Test suite for the Playwright lifecycle wrapper"""

    @pytest.mark.asyncio
    async def test_initialize_launches_headless_chromium(self, playwright_stack):
        engine = BrowserEngine()
        await engine.initialize()

        playwright_stack["playwright"].chromium.launch.assert_awaited_once_with(
            headless=True,
            args=['--no-sandbox', '--disable-setuid-sandbox']
        )
        assert engine.browser is playwright_stack["browser"]

    @pytest.mark.asyncio
    async def test_initialize_honours_config(self, playwright_stack):
        engine = BrowserEngine(ScenarioConfig(headless=False, browser_args=[]))
        await engine.initialize()

        playwright_stack["playwright"].chromium.launch.assert_awaited_once_with(
            headless=False,
            args=[]
        )

    @pytest.mark.asyncio
    async def test_new_page_sets_viewport(self, playwright_stack):
        engine = BrowserEngine()
        await engine.initialize()

        page = await engine.new_page()

        assert page is playwright_stack["page"]
        assert engine.page is page
        playwright_stack["browser"].new_context.assert_awaited_once_with(
            viewport={"width": 1280, "height": 720}
        )

    @pytest.mark.asyncio
    async def test_new_page_forwards_console_to_log(self, playwright_stack, caplog):
        engine = BrowserEngine()
        await engine.initialize()
        page = await engine.new_page()

        handlers = {c.args[0]: c.args[1] for c in page.on.call_args_list}
        assert set(handlers) == {"console", "pageerror"}

        with caplog.at_level(logging.DEBUG, logger='account_lifecycle.browser_engine'):
            handlers["console"](MagicMock(text="hello from the page"))
            handlers["pageerror"]("ReferenceError: x is not defined")

        assert "Console: hello from the page" in caplog.text
        assert "Page error: ReferenceError" in caplog.text

    @pytest.mark.asyncio
    async def test_new_page_requires_initialize(self):
        engine = BrowserEngine()

        with pytest.raises(RuntimeError):
            await engine.new_page()

    @pytest.mark.asyncio
    async def test_cleanup_closes_everything(self, playwright_stack):
        engine = BrowserEngine()
        await engine.initialize()
        await engine.new_page()

        await engine.cleanup()

        playwright_stack["context"].close.assert_awaited_once()
        playwright_stack["browser"].close.assert_awaited_once()
        playwright_stack["playwright"].stop.assert_awaited_once()
        assert engine.browser is None
        assert engine.page is None

    @pytest.mark.asyncio
    async def test_cleanup_is_idempotent(self, playwright_stack):
        engine = BrowserEngine()
        await engine.initialize()

        await engine.cleanup()
        await engine.cleanup()

        playwright_stack["browser"].close.assert_awaited_once()
        playwright_stack["playwright"].stop.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_cleanup_without_initialize(self):
        engine = BrowserEngine()
        await engine.cleanup()

        assert engine.playwright is None

    @pytest.mark.asyncio
    async def test_cleanup_continues_after_failed_close(self, playwright_stack, caplog):
        playwright_stack["context"].close.side_effect = PlaywrightError(
            "Target page, context or browser has been closed"
        )
        engine = BrowserEngine()
        await engine.initialize()
        await engine.new_page()

        await engine.cleanup()

        playwright_stack["browser"].close.assert_awaited_once()
        playwright_stack["playwright"].stop.assert_awaited_once()
        assert engine.context is None
        assert engine.browser is None
        assert engine.playwright is None
        assert "Failed to close context" in caplog.text
