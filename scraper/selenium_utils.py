"""Selenium utility functions for loading pages in Chrome."""

import time
from typing import Optional
from selenium import webdriver
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.remote.webdriver import WebDriver
from utils.logger import get_logger, timed_operation
from config.settings import get_config

logger = get_logger(__name__)


def create_webdriver(headless: Optional[bool] = None) -> webdriver.Chrome:
    """
    Create and configure a Selenium WebDriver instance.

    Args:
        headless: Run Chrome without a window (uses config default if None)

    Returns:
        Configured Chrome WebDriver
    """
    config = get_config()

    if headless is None:
        headless = config.get('selenium.headless', False)

    chrome_options = Options()

    if headless:
        chrome_options.add_argument('--headless')

    chrome_options.add_argument('--no-sandbox')
    chrome_options.add_argument('--disable-dev-shm-usage')
    chrome_options.add_argument('--disable-blink-features=AutomationControlled')

    driver = webdriver.Chrome(options=chrome_options)
    driver.set_page_load_timeout(config.get('selenium.page_load_timeout', 30))

    logger.info(f"Created Chrome WebDriver ({'headless' if headless else 'visible'})")

    return driver


@timed_operation("Page readiness wait")
def wait_for_page_ready(driver: WebDriver, timeout: Optional[float] = None) -> bool:
    """
    Wait for page to be ready (document ready state complete).

    Args:
        driver: Selenium WebDriver instance
        timeout: Maximum time to wait in seconds (uses config default if None)

    Returns:
        True if page is ready, False if timeout
    """
    if timeout is None:
        timeout = get_config().get('selenium.ready_timeout', 15)

    start_time = time.time()

    while time.time() - start_time < timeout:
        ready_state = driver.execute_script("return document.readyState")

        if ready_state == "complete":
            logger.debug("Page ready")
            return True

        time.sleep(0.1)

    logger.debug("Page not fully ready, proceeding anyway")
    return False
