import asyncio
import logging
import sys
from typing import Optional

from .scenario import AccountLifecycleScenario


def run_scenario(scenario: Optional[AccountLifecycleScenario] = None) -> int:
    """Run the scenario to completion and map the outcome to an exit code"""
    scenario = scenario or AccountLifecycleScenario()
    reporter = scenario.reporter

    try:
        outcome = asyncio.run(scenario.run())
    except KeyboardInterrupt:
        logging.info("Scenario stopped by user")
        return 1
    except Exception as e:
        logging.error(f"Scenario error: {e}")
        reporter.suite_failed(repr(e))
        return 1

    if outcome.exit_code == 0:
        reporter.all_executed()
    return outcome.exit_code


def main():
    """Entry point for the account lifecycle scenario"""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    sys.exit(run_scenario())


if __name__ == "__main__":
    main()
