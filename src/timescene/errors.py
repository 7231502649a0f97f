"""Exception types raised by timescene."""

from __future__ import annotations


class DeveloperError(ValueError):
    """A caller broke an API precondition (e.g. a required argument is missing).

    Raised synchronously and never broadcast on a data source's error event.
    """


class FetchError(RuntimeError):
    """Fetching or decoding a remote document failed."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to load {url}: {reason}")
        self.url = url
        self.reason = reason
