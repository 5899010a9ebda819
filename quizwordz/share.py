"""Share text for a finished round."""

from urllib.parse import urlencode
from pydantic import BaseModel


GAME_TITLE = "QuizWordz 5x5"


def format_time(seconds: int) -> str:
    """Format seconds as m:ss (e.g. 95 -> '1:35')."""
    minutes, secs = divmod(max(0, int(seconds)), 60)
    return f"{minutes}:{secs:02d}"


def build_locator(base_url: str, set_id: str) -> str:
    """URL that reopens the game on a specific word set."""
    base = base_url.split("?", 1)[0]
    return f"{base}?{urlencode({'set': set_id})}"


class SharePayload(BaseModel):
    """Data the host needs to copy or display a result."""
    theme: str
    time_taken: int
    locator: str

    @property
    def time_text(self) -> str:
        return format_time(self.time_taken)

    def message(self) -> str:
        return (
            f'I completed "{self.theme}" in {self.time_text} on {GAME_TITLE}!\n\n'
            f"Can you beat my time? Try it here: {self.locator}"
        )


def build_share_payload(set_id: str, theme: str, time_taken: int, base_url: str) -> SharePayload:
    return SharePayload(
        theme=theme,
        time_taken=time_taken,
        locator=build_locator(base_url, set_id),
    )
