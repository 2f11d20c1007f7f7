from typing import List, Tuple
from pydantic import BaseModel, ConfigDict


class Selectors(BaseModel):
    """CSS selectors used across the account pages"""

    model_config = ConfigDict(frozen=True)

    # Header / navigation
    create_account_link: str = 'a[href*="customer/account/create"]'
    sign_in_link: str = 'a[href*="customer/account/login"]'
    logout_link: str = 'a[href*="customer/account/logout"]'
    account_edit_link: str = 'a[href*="customer/account/edit"]'
    customer_menu: str = '.customer-name'
    logged_in: str = '.logged-in'
    success_message: str = '.message-success'

    # Registration form
    first_name: str = '#firstname'
    last_name: str = '#lastname'
    register_email: str = '#email_address'
    password: str = '#password'
    password_confirmation: str = '#password-confirmation'
    create_account_button: str = 'button[title="Create an Account"]'

    # Login form
    login_email: str = '#email'
    login_password: str = '#pass'
    login_button: str = '#send2'

    # Account information form
    change_password_toggle: str = '#change-password'
    current_password: str = '#current-password'
    save_button: str = 'button[title="Save"]'


class ScenarioConfig(BaseModel):
    """Inline settings for one scenario run"""

    model_config = ConfigDict(frozen=True)

    base_url: str = 'https://magento.softwaretestingboard.com/'
    account_url_pattern: str = '**/customer/account/**'

    navigation_timeout_ms: int = 30000
    account_area_timeout_ms: int = 15000
    ui_settle_timeout_ms: int = 5000

    headless: bool = True
    browser_args: List[str] = ['--no-sandbox', '--disable-setuid-sandbox']
    viewport: Tuple[int, int] = (1280, 720)

    selectors: Selectors = Selectors()
