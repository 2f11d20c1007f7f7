"""
Magento Account Lifecycle

Browser automation that registers a throwaway customer on the Magento demo
storefront and walks it through login, logout and a password change.
"""

__version__ = "0.1.0"

from .scenario import AccountLifecycleScenario
from .browser_engine import BrowserEngine
from .page_actions import AccountPageActions
from .config import ScenarioConfig, Selectors
from .identity import TestIdentity, generate_identity
from .reporter import ConsoleReporter
from .results import RunOutcome

__all__ = [
    "AccountLifecycleScenario",
    "BrowserEngine",
    "AccountPageActions",
    "ScenarioConfig",
    "Selectors",
    "TestIdentity",
    "generate_identity",
    "ConsoleReporter",
    "RunOutcome"
]
