import logging
from typing import Optional

from playwright.async_api import Error as PlaywrightError

from .browser_engine import BrowserEngine
from .config import ScenarioConfig
from .identity import TestIdentity, generate_identity
from .page_actions import AccountPageActions
from .reporter import ConsoleReporter
from .results import RunOutcome

logger = logging.getLogger(__name__)


class AccountLifecycleScenario:
    """Registration, logout, login and password change against one storefront.

    Steps run in a fixed order on a single page. Only a failed registration
    stops the sequence; every later step is best-effort and just reports its
    result. Unexpected driver errors end the run through ``run()``'s handler,
    which records them on the returned ``RunOutcome``.
    """

    def __init__(
            self,
            config: Optional[ScenarioConfig] = None,
            engine: Optional[BrowserEngine] = None,
            reporter: Optional[ConsoleReporter] = None,
            identity: Optional[TestIdentity] = None
    ):
        self.config = config or ScenarioConfig()
        self.engine = engine or BrowserEngine(self.config)
        self.reporter = reporter or ConsoleReporter()
        self.identity = identity

    async def run(self) -> RunOutcome:
        """Run the whole scenario and return how it ended.

        Browser launch failures propagate to the caller; everything after the
        launch is caught here and the browser is always closed. A caught error
        is stored on the outcome and maps to exit code 1: the run is not
        reported as successful even though the handler absorbed the error.
        """
        identity = self.identity or generate_identity()
        outcome = RunOutcome()

        self.reporter.starting()

        try:
            await self.engine.initialize()
        except Exception:
            await self.engine.cleanup()
            raise

        try:
            page = await self.engine.new_page()
            actions = AccountPageActions(page, self.config)

            self.reporter.test_email(identity.email)

            await self.run_steps(actions, identity, outcome)

            self.reporter.summary(identity.email)

        except Exception as e:
            logger.exception("Scenario stopped by unexpected error")
            self.reporter.execution_failed(e)
            outcome.error = str(e) or repr(e)

        finally:
            await self.engine.cleanup()
            self.reporter.browser_closed()

        return outcome

    async def run_steps(self, actions: AccountPageActions, identity: TestIdentity, outcome: RunOutcome):
        if not await self.register(actions, identity):
            outcome.aborted = True
            return

        await self.verify_logged_in(actions)
        await self.logout(actions)
        await self.login(actions, identity)
        await self.change_password(actions, identity)

    async def register(self, actions: AccountPageActions, identity: TestIdentity) -> bool:
        """TEST 1: create the account; False means the run must stop"""
        s = self.config.selectors

        self.reporter.step_started("📝", "TEST 1: Starting user registration...")

        try:
            await actions.open_home()
        except PlaywrightError as e:
            logger.warning("Could not reach %s: %s", self.config.base_url, e)
            return self._registration_failed("site unreachable")

        await actions.click_and_settle(s.create_account_link)

        await actions.fill_fields({
            s.first_name: identity.first_name,
            s.last_name: identity.last_name,
            s.register_email: identity.email,
            s.password: identity.password,
            s.password_confirmation: identity.password
        })
        await actions.click(s.create_account_button)

        if not await actions.wait_for_account_area():
            return self._registration_failed("account area not reached")

        if not await actions.is_visible(s.success_message):
            return self._registration_failed("no success message")

        self.reporter.step_passed("TEST 1", "User registration successful")
        return True

    def _registration_failed(self, reason: str) -> bool:
        logger.warning("Registration failed: %s", reason)
        self.reporter.step_failed("TEST 1", "Registration failed")
        return False

    async def verify_logged_in(self, actions: AccountPageActions):
        """TEST 2: a new account is signed in straight after registration"""
        self.reporter.step_started("🔐", "TEST 2: Verifying login status...")

        if await actions.is_visible(self.config.selectors.logged_in):
            self.reporter.step_passed("TEST 2", "User is logged in after registration")
        else:
            self.reporter.step_failed("TEST 2", "User not logged in")

    async def logout(self, actions: AccountPageActions):
        """TEST 3"""
        self.reporter.step_started("🚪", "TEST 3: Testing user logout...")

        await actions.logout()

        if await actions.is_visible(self.config.selectors.sign_in_link):
            self.reporter.step_passed("TEST 3", "User logout successful")
        else:
            self.reporter.step_failed("TEST 3", "Logout failed")

    async def login(self, actions: AccountPageActions, identity: TestIdentity):
        """TEST 4"""
        self.reporter.step_started("🔑", "TEST 4: Testing login with credentials...")

        reached = await actions.login(identity.email, identity.password)

        if reached and await actions.is_visible(self.config.selectors.logged_in):
            self.reporter.step_passed("TEST 4", "Login with credentials successful")
        else:
            self.reporter.step_failed("TEST 4", "Login failed")

    async def change_password(self, actions: AccountPageActions, identity: TestIdentity):
        """TEST 5, followed by a login with the new password when it succeeds"""
        s = self.config.selectors

        self.reporter.step_started("🔐", "TEST 5: Testing password change...")

        await actions.click_and_settle(s.account_edit_link)

        await actions.check(s.change_password_toggle)
        await actions.wait_until_visible(s.current_password)

        await actions.fill_fields({
            s.current_password: identity.password,
            s.password: identity.new_password,
            s.password_confirmation: identity.new_password
        })
        await actions.click_and_settle(s.save_button)

        if not await actions.is_visible(s.success_message):
            self.reporter.step_failed("TEST 5", "Password change failed")
            return

        self.reporter.step_passed("TEST 5", "Password change successful")

        await self.login_with_new_password(actions, identity)

    async def login_with_new_password(self, actions: AccountPageActions, identity: TestIdentity):
        self.reporter.step_started("🔄", "Testing login with new password...")

        await actions.logout()
        reached = await actions.login(identity.email, identity.new_password)

        if reached and await actions.is_visible(self.config.selectors.logged_in):
            self.reporter.step_passed("BONUS TEST", "Login with new password successful")
        else:
            self.reporter.step_failed("BONUS TEST", "New password login failed")
