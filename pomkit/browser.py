"""Playwright browser manager for pomkit."""

from __future__ import annotations

from playwright.async_api import Browser, BrowserContext, Page, async_playwright

from pomkit.config import PomConfig
from pomkit.drivers.playwright import PlaywrightDriver
from pomkit.exceptions import BrowserError
from pomkit.logger import get_logger

log = get_logger(__name__)

_BROWSERS = ("chromium", "firefox", "webkit")


class BrowserManager:
    """Manages Playwright browser lifecycle."""

    def __init__(self, config: PomConfig | None = None) -> None:
        self.config = config or PomConfig.from_env()
        self._playwright = None
        self._browser: Browser | None = None
        self._context: BrowserContext | None = None
        self._page: Page | None = None

    async def start(self) -> None:
        """Launch the configured browser with a fresh context and page."""
        if self.config.browser not in _BROWSERS:
            raise BrowserError(f"Unsupported browser: {self.config.browser}")
        try:
            self._playwright = await async_playwright().start()
            launcher = getattr(self._playwright, self.config.browser)
            self._browser = await launcher.launch(headless=self.config.headless)
            self._context = await self._browser.new_context(
                base_url=self.config.base_url
            )
            self._page = await self._context.new_page()
            log.info(
                "browser_started",
                browser=self.config.browser,
                headless=self.config.headless,
            )
        except Exception as exc:
            raise BrowserError(f"Failed to start browser: {exc}") from exc

    async def stop(self) -> None:
        """Close browser and cleanup."""
        try:
            if self._page and not self._page.is_closed():
                await self._page.close()
            if self._context:
                await self._context.close()
            if self._browser:
                await self._browser.close()
            if self._playwright:
                await self._playwright.stop()
        except Exception as exc:
            log.warning("browser_stop_error", error=str(exc))
        finally:
            self._page = None
            self._context = None
            self._browser = None
            self._playwright = None
            log.info("browser_stopped")

    async def get_page(self) -> Page:
        """Get the current page, reopening one if it was closed."""
        if self._page and not self._page.is_closed():
            return self._page
        if self._context:
            self._page = await self._context.new_page()
            return self._page
        raise BrowserError("Browser not started, call start() first")

    async def driver(self) -> PlaywrightDriver:
        """Driver bound to the current page."""
        return PlaywrightDriver(await self.get_page(), self.config)
