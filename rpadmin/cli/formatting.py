"""
Display Formatting.

Plain-text renderings of RPs and RP URLs, the destroy challenge phrase,
and the search predicate used by the RP picker.
"""

from rpadmin.cli.models import ACCESS_NORMAL, ACCESS_READ, RPSummary, RPUrl

DEFAULT_TITLE_WIDTH = 30
DATE_FORMAT = "%d %b %Y"

PARTICIPANT_PREFIX = "/rp/"
SPECTATOR_PREFIX = "/read/"


def format_rp_summary(rp: RPSummary, title_width: int = DEFAULT_TITLE_WIDTH) -> str:
    """Render as `<title padded> (DD Mon YYYY)`."""
    return f"{rp.title:<{title_width}} ({rp.timestamp.strftime(DATE_FORMAT)})"


def format_rp_url(entry: RPUrl) -> str:
    """Render a URL entry. Unknown access values are marked, never dropped."""
    if entry.access == ACCESS_NORMAL:
        return PARTICIPANT_PREFIX + entry.url
    if entry.access == ACCESS_READ:
        return SPECTATOR_PREFIX + entry.url
    return f"???{entry.access}???{entry.url}"


def challenge_phrase(title: str) -> str:
    """
    Text the operator must type to destroy the RP called `title`.

    Full Unicode uppercasing: "Straße" becomes "DESTROY STRASSE".
    """
    return f"destroy {title}".upper()


def title_matches(title: str, term: str) -> bool:
    """Case-insensitive substring match."""
    return term.lower() in title.lower()


def filter_rps(rps: list[RPSummary], term: str) -> list[RPSummary]:
    """RPs whose title contains `term`, in their original order."""
    return [rp for rp in rps if title_matches(rp.title, term)]
