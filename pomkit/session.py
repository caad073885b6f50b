"""Async context manager wiring a browser to the component layer."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from pomkit.browser import BrowserManager
from pomkit.config import PomConfig
from pomkit.drivers import use_driver
from pomkit.drivers.playwright import PlaywrightDriver
from pomkit.logger import configure_logging, get_logger

log = get_logger(__name__)


@asynccontextmanager
async def browser_session(
    config: PomConfig | None = None,
) -> AsyncIterator[PlaywrightDriver]:
    """Start a browser, bind its driver, and tear everything down on exit.

    Commands still queued when the block exits are run before the browser
    closes, so a test that forgets a final ``await`` still executes its
    assertions. Nothing is flushed if the block raised.

    Example::

        async with browser_session() as driver:
            await driver.visit("/login")
            await Input("email", "#email").type("a@b.com").should_have_value("a@b.com")
    """
    config = config or PomConfig.from_env()
    configure_logging(config.log_level)
    manager = BrowserManager(config)
    await manager.start()
    try:
        driver = await manager.driver()
        with use_driver(driver):
            yield driver
            if driver.pending:
                log.debug("session_flush", pending=len(driver.pending))
                await driver.run()
    finally:
        await manager.stop()
