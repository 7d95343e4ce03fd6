from textual.message import Message

from .feed import FeedEvent


class FeedUpdated(Message):
    """Posted to the app whenever the NewsFeed emits an event."""
    def __init__(self, event: FeedEvent) -> None:
        self.event = event
        super().__init__()
