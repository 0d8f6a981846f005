"""
Admin Console Loop.

Two nested loops:

    PickRP  - fetch the RP list, operator picks one (or quits)
    ViewRP  - fetch and show the RP's URLs, operator picks an action:
              go back | edit urls | destroy rp

Every iteration fetches fresh data from the server. Server errors are
never caught here; they propagate to the command's error handler.
"""

from enum import Enum
from typing import Protocol

from rich.console import Console

from rpadmin.cli.admin_api import AdminAPI
from rpadmin.cli.formatting import (
    DEFAULT_TITLE_WIDTH,
    challenge_phrase,
    format_rp_summary,
    format_rp_url,
    title_matches,
)
from rpadmin.cli.models import RPSummary
from rpadmin.cli.prompts import Searcher
from rpadmin.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

BANNER = "RPNow Admin Console"


class RPAction(str, Enum):
    """Actions offered for a selected RP, in menu order."""

    GO_BACK = "go back"
    EDIT_URLS = "edit urls"  # placeholder, performs no action
    DESTROY = "destroy rp"


class Prompter(Protocol):
    def select(
        self,
        label: str,
        items: list[str],
        searcher: Searcher | None = None,
        allow_quit: bool = False,
    ) -> int | None: ...

    def ask(self, label: str) -> str: ...


class AdminConsole:
    """
    Interactive navigation over the RPs hosted by an admin server.

    Usage:
        admin = AdminConsole(AdminAPI(client), ConsolePrompter())
        await admin.run()
    """

    def __init__(
        self,
        api: AdminAPI,
        prompter: Prompter,
        console: Console | None = None,
        title_width: int = DEFAULT_TITLE_WIDTH,
    ) -> None:
        self.api = api
        self.prompter = prompter
        self.console = console or Console()
        self.title_width = title_width

    def _say(self, text: str = "") -> None:
        self.console.print(text, markup=False, highlight=False)

    async def run(self) -> None:
        """Run until the operator quits. Server errors propagate."""
        self._say(BANNER)
        await self.show_status()

        while True:
            rp = await self.pick_rp()
            if rp is None:
                return
            await self.view_rp(rp)

    async def show_status(self) -> None:
        """Confirm the server is reachable and print its banner."""
        self.console.print("Getting server status... ", end="", markup=False)
        status = await self.api.check_status()
        self._say(status.line)

    async def pick_rp(self) -> RPSummary | None:
        """Fetch the RP list and let the operator choose. None means quit."""
        while True:
            rps = await self.api.list_rps()
            self._say()

            if not rps:
                self._say("No RPs found.")
                choice = self.prompter.select("Nothing to choose", ["refresh"], allow_quit=True)
                if choice is None:
                    return None
                continue

            def searcher(term: str, index: int) -> bool:
                return title_matches(rps[index].title, term)

            index = self.prompter.select(
                "Choose an RP",
                [format_rp_summary(rp, self.title_width) for rp in rps],
                searcher=searcher,
                allow_quit=True,
            )
            return None if index is None else rps[index]

    async def view_rp(self, rp: RPSummary) -> None:
        """Show one RP and handle actions until the operator leaves it."""
        actions = list(RPAction)

        while True:
            urls = await self.api.get_rp_urls(rp.rpid)

            self._say()
            self._say(rp.title)
            for entry in urls:
                self._say(f"*  {format_rp_url(entry)}")

            index = self.prompter.select(f'Modify "{rp.title}"', [a.value for a in actions])
            action = actions[index]

            if action is RPAction.GO_BACK:
                return
            if action is RPAction.EDIT_URLS:
                self.console.print("[dim]Editing URLs is not supported yet.[/dim]")
                continue
            if await self.confirm_destroy(rp):
                return

    async def confirm_destroy(self, rp: RPSummary) -> bool:
        """
        Destroy `rp` if the operator types the challenge phrase exactly.

        Returns:
            True if the RP was destroyed.
        """
        phrase = challenge_phrase(rp.title)
        answer = self.prompter.ask(f'Type "{phrase}"')

        if answer != phrase:
            log_with_source(logger, "cli", "info", "Destroy confirmation rejected", rpid=rp.rpid)
            self._say("Incorrect. Will not delete.")
            return False

        await self.api.destroy_rp(rp.rpid)
        log_with_source(logger, "cli", "info", "RP destroyed", rpid=rp.rpid, title=rp.title)
        self._say(f'BOOM! "{rp.title}" is no more.')
        return True
