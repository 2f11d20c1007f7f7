from typing import Dict, Optional
from playwright.async_api import Page, TimeoutError as PlaywrightTimeoutError
import logging

from .config import ScenarioConfig

logger = logging.getLogger(__name__)


class AccountPageActions:
    """Shared page interactions for the customer account pages"""

    def __init__(self, page: Page, config: Optional[ScenarioConfig] = None):
        self.page = page
        self.config = config or ScenarioConfig()
        self.selectors = self.config.selectors

    async def open_home(self):
        await self.page.goto(
            self.config.base_url,
            wait_until='networkidle',
            timeout=self.config.navigation_timeout_ms
        )

    async def click(self, selector: str):
        await self.page.click(selector)

    async def check(self, selector: str):
        await self.page.check(selector)

    async def click_and_settle(self, selector: str):
        """Click an element and wait for the network to go idle"""
        await self.page.click(selector)
        await self.page.wait_for_load_state('networkidle')

    async def fill_fields(self, values: Dict[str, str]):
        """Fill form fields in order, keyed by selector"""
        for selector, value in values.items():
            await self.page.fill(selector, value)

    async def wait_for_account_area(self) -> bool:
        """Wait until the URL lands in the customer account section.

        Returns False when the bound elapses.
        """
        try:
            await self.page.wait_for_url(
                self.config.account_url_pattern,
                timeout=self.config.account_area_timeout_ms
            )
            return True
        except PlaywrightTimeoutError:
            logger.warning(
                "Account area not reached within %d ms (at %s)",
                self.config.account_area_timeout_ms, self.page.url
            )
            return False

    async def is_visible(self, selector: str) -> bool:
        return await self.page.is_visible(selector)

    async def wait_until_visible(self, selector: str):
        """Poll for an element instead of sleeping through UI animations"""
        await self.page.wait_for_selector(
            selector,
            state='visible',
            timeout=self.config.ui_settle_timeout_ms
        )

    async def open_account_menu(self):
        """Open the customer dropdown and wait for its logout entry"""
        await self.page.click(self.selectors.customer_menu)
        await self.wait_until_visible(self.selectors.logout_link)

    async def logout(self):
        await self.open_account_menu()
        await self.click_and_settle(self.selectors.logout_link)

    async def login(self, email: str, password: str) -> bool:
        """Sign in through the header link; True once the account area loads"""
        await self.click_and_settle(self.selectors.sign_in_link)
        await self.fill_fields({
            self.selectors.login_email: email,
            self.selectors.login_password: password
        })
        await self.page.click(self.selectors.login_button)
        return await self.wait_for_account_area()
