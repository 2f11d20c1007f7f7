from playwright.async_api import async_playwright, Browser, Page, BrowserContext
from typing import Optional
import logging

from .config import ScenarioConfig

logger = logging.getLogger(__name__)


class BrowserEngine:
    def __init__(self, config: Optional[ScenarioConfig] = None):
        self.config = config or ScenarioConfig()
        self.playwright = None
        self.browser: Optional[Browser] = None
        self.context: Optional[BrowserContext] = None
        self.page: Optional[Page] = None

    async def initialize(self):
        """Start Playwright and launch Chromium"""
        self.playwright = await async_playwright().start()
        self.browser = await self.playwright.chromium.launch(
            headless=self.config.headless,
            args=list(self.config.browser_args)
        )
        logger.info("Chromium launched (headless=%s)", self.config.headless)

    async def new_page(self) -> Page:
        """Open the single page used by the scenario"""
        if self.browser is None:
            raise RuntimeError("Browser not initialized")

        width, height = self.config.viewport
        self.context = await self.browser.new_context(
            viewport={"width": width, "height": height}
        )
        self.page = await self.context.new_page()

        # Forward page console and errors to the log
        self.page.on("console", lambda msg: logger.debug("Console: %s", msg.text))
        self.page.on("pageerror", lambda err: logger.debug("Page error: %s", err))

        return self.page

    async def cleanup(self):
        """Clean up browser resources, carrying on past any close that fails"""
        closers = []
        if self.context:
            closers.append(("context", self.context.close))
        if self.browser:
            closers.append(("browser", self.browser.close))
        if self.playwright:
            closers.append(("playwright", self.playwright.stop))

        self.context = None
        self.browser = None
        self.playwright = None
        self.page = None

        for name, close in closers:
            try:
                await close()
            except Exception as e:
                logger.warning("Failed to close %s: %s", name, e)
