"""Tests for BrowserManager."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from pomkit.browser import BrowserManager
from pomkit.config import PomConfig
from pomkit.drivers.playwright import PlaywrightDriver
from pomkit.exceptions import BrowserError


def _patched_playwright(mock_pw: MagicMock) -> tuple[AsyncMock, AsyncMock, AsyncMock]:
    mock_playwright_inst = AsyncMock()
    mock_browser = AsyncMock()
    mock_context = AsyncMock()
    mock_page = AsyncMock()
    mock_page.is_closed = MagicMock(return_value=False)
    mock_page.set_default_timeout = MagicMock()

    mock_pw.return_value.start = AsyncMock(return_value=mock_playwright_inst)
    for name in ("chromium", "firefox", "webkit"):
        getattr(mock_playwright_inst, name).launch = AsyncMock(return_value=mock_browser)
    mock_browser.new_context = AsyncMock(return_value=mock_context)
    mock_context.new_page = AsyncMock(return_value=mock_page)
    return mock_playwright_inst, mock_browser, mock_page


class TestBrowserManagerLifecycle:
    async def test_start_and_stop(self) -> None:
        mgr = BrowserManager(PomConfig(headless=True))
        with patch("pomkit.browser.async_playwright") as mock_pw:
            _, mock_browser, mock_page = _patched_playwright(mock_pw)

            await mgr.start()
            assert mgr._browser is mock_browser
            assert mgr._page is mock_page

            await mgr.stop()
            assert mgr._browser is None
            assert mgr._page is None

    async def test_launches_configured_browser(self) -> None:
        mgr = BrowserManager(
            PomConfig(browser="firefox", headless=False, base_url="https://shop.test")
        )
        with patch("pomkit.browser.async_playwright") as mock_pw:
            inst, mock_browser, _ = _patched_playwright(mock_pw)
            await mgr.start()
        inst.firefox.launch.assert_awaited_once_with(headless=False)
        mock_browser.new_context.assert_awaited_once_with(base_url="https://shop.test")

    async def test_unsupported_browser(self) -> None:
        mgr = BrowserManager(PomConfig(browser="netscape"))
        with pytest.raises(BrowserError, match="Unsupported browser"):
            await mgr.start()

    async def test_start_failure_wraps_error(self) -> None:
        mgr = BrowserManager(PomConfig())
        with patch("pomkit.browser.async_playwright") as mock_pw:
            mock_pw.return_value.start = AsyncMock(side_effect=RuntimeError("no binary"))
            with pytest.raises(BrowserError, match="no binary"):
                await mgr.start()

    async def test_get_page_before_start_raises(self) -> None:
        mgr = BrowserManager(PomConfig())
        with pytest.raises(BrowserError, match="not started"):
            await mgr.get_page()

    async def test_get_page_returns_existing(self) -> None:
        mgr = BrowserManager(PomConfig())
        mock_page = AsyncMock()
        mock_page.is_closed = MagicMock(return_value=False)
        mgr._page = mock_page
        mgr._context = AsyncMock()
        result = await mgr.get_page()
        assert result is mock_page

    async def test_get_page_reopens_closed_page(self) -> None:
        mgr = BrowserManager(PomConfig())
        closed = AsyncMock()
        closed.is_closed = MagicMock(return_value=True)
        fresh = AsyncMock()
        mgr._page = closed
        mgr._context = AsyncMock()
        mgr._context.new_page = AsyncMock(return_value=fresh)
        assert await mgr.get_page() is fresh

    async def test_driver_binds_current_page(self) -> None:
        config = PomConfig(command_timeout_ms=900)
        mgr = BrowserManager(config)
        mock_page = AsyncMock()
        mock_page.is_closed = MagicMock(return_value=False)
        mock_page.set_default_timeout = MagicMock()
        mgr._page = mock_page
        mgr._context = AsyncMock()
        driver = await mgr.driver()
        assert isinstance(driver, PlaywrightDriver)
        assert driver.page is mock_page
        assert driver.config is config
