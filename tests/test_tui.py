"""Tests for the Octoview TUI application."""

import pytest
import respx
from click.testing import CliRunner
from httpx import Response

from octoview.cli import cli
from octoview.models import Follower, ProfileIdentity
from octoview.navigation import Destination

from conftest import API, RecordingOpener


OCTOCAT = ProfileIdentity(display_name="The Octocat", login_handle="octocat")


class TestBrowseCommand:
    """Tests for the browse command."""

    def test_browse_command_exists(self) -> None:
        """Test that browse command is registered."""
        runner = CliRunner()
        result = runner.invoke(cli, ["browse", "--help"])
        assert result.exit_code == 0
        assert "interactive profile browser" in result.output

    def test_browse_help_shows_shortcuts(self) -> None:
        """Test that help shows keyboard shortcuts."""
        runner = CliRunner()
        result = runner.invoke(cli, ["browse", "--help"])
        assert "Keyboard shortcuts" in result.output
        assert "Search" in result.output
        assert "Quit" in result.output


class TestTUIModule:
    """Tests for TUI module imports."""

    def test_import_app(self) -> None:
        """Test that OctoviewApp can be imported."""
        from octoview.tui import OctoviewApp
        assert OctoviewApp is not None

    def test_app_class_attributes(self) -> None:
        """Test OctoviewApp has required attributes."""
        from octoview.tui import OctoviewApp
        assert hasattr(OctoviewApp, "TITLE")
        assert hasattr(OctoviewApp, "BINDINGS")
        assert hasattr(OctoviewApp, "CSS")

    def test_every_destination_has_a_screen(self) -> None:
        """Test the screen table covers all destinations."""
        from octoview.tui.app import SCREENS
        assert set(SCREENS) == set(Destination)

    def test_home_bindings(self) -> None:
        """Test Home has search and reset key bindings."""
        from octoview.tui.app import HomeScreen
        binding_keys = [b.key for b in HomeScreen.BINDINGS]
        assert "slash" in binding_keys
        assert "ctrl+r" in binding_keys


class TestAppNavigation:
    """Tests driving the app with Textual's pilot."""

    @pytest.mark.asyncio
    async def test_launch_on_anonymous_home(self) -> None:
        """Test a fresh launch shows Home with the anonymous identity."""
        from octoview.tui.app import HomeScreen, OctoviewApp

        app = OctoviewApp(opener=RecordingOpener())
        async with app.run_test() as pilot:
            await pilot.pause()
            assert isinstance(app.screen, HomeScreen)
            assert app.screen.controller.identity.is_anonymous
            assert app.navigator.depth == 1

    @pytest.mark.asyncio
    async def test_push_and_back(self) -> None:
        """Test the screen stack follows navigator push and back."""
        from octoview.tui.app import HomeScreen, OctoviewApp, OrgsScreen

        with respx.mock:
            respx.get(f"{API}/users/octocat/orgs").mock(
                return_value=Response(200, json=[{"login": "github"}])
            )
            app = OctoviewApp(opener=RecordingOpener())
            async with app.run_test() as pilot:
                await pilot.pause()
                app.navigator.push(Destination.ORGS, OCTOCAT)
                await pilot.pause()
                await app.workers.wait_for_complete()
                await pilot.pause()

                assert isinstance(app.screen, OrgsScreen)
                assert [o.login for o in app.screen.controller.items] == ["github"]

                app.navigator.back()
                await pilot.pause()
                assert isinstance(app.screen, HomeScreen)

    @pytest.mark.asyncio
    async def test_reset_rebuilds_stack(self) -> None:
        """Test reset_to leaves a single Home screen with the new identity."""
        from octoview.tui.app import HomeScreen, OctoviewApp

        with respx.mock:
            respx.get(url__startswith=f"{API}/users/octocat").mock(
                return_value=Response(200, json=[])
            )
            app = OctoviewApp(opener=RecordingOpener())
            async with app.run_test() as pilot:
                await pilot.pause()
                app.navigator.push(Destination.FOLLOWERS, OCTOCAT)
                await pilot.pause()
                app.navigator.reset_to(Destination.HOME, ProfileIdentity(login_handle="torvalds"))
                await pilot.pause()
                await app.workers.wait_for_complete()
                await pilot.pause()

                assert isinstance(app.screen, HomeScreen)
                assert app.screen.controller.identity.login_handle == "torvalds"
                # default screen plus the new Home
                assert len(app.screen_stack) == 2

    @pytest.mark.asyncio
    async def test_follower_pivot_resets_stack(self) -> None:
        """Test choosing a follower leaves a single Home screen for them."""
        from octoview.tui.app import FollowersScreen, HomeScreen, OctoviewApp

        with respx.mock:
            respx.get(f"{API}/users/octocat/followers").mock(
                return_value=Response(200, json=[{"login": "torvalds"}])
            )
            respx.get(f"{API}/users/torvalds").mock(
                return_value=Response(200, json={"login": "torvalds", "name": "Linus Torvalds"})
            )
            app = OctoviewApp(opener=RecordingOpener())
            async with app.run_test() as pilot:
                await pilot.pause()
                app.navigator.push(Destination.FOLLOWERS, OCTOCAT)
                await pilot.pause()
                await app.workers.wait_for_complete()
                await pilot.pause()

                assert isinstance(app.screen, FollowersScreen)
                follower = app.screen.controller.items[0]
                assert follower == Follower(login="torvalds")

                app.screen.choose(follower)
                await pilot.pause()
                await app.workers.wait_for_complete()
                await pilot.pause()
                await app.workers.wait_for_complete()
                await pilot.pause()

                assert isinstance(app.screen, HomeScreen)
                assert app.screen.controller.identity.login_handle == "torvalds"
                assert app.session.current.login_handle == "torvalds"
                assert app.navigator.depth == 1
                # default screen plus the new Home
                assert len(app.screen_stack) == 2
