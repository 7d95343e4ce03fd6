from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import ListItem, Static
from textual.reactive import reactive
from rich.text import Text

from .datamodels import Article
from .formatting import time_ago


# --- UI Widgets ---
class CategoryListItem(ListItem):
    def __init__(self, category: str):
        super().__init__()
        self.category = category

    def compose(self) -> ComposeResult:
        yield Static(Text(self.category))


class ArticleItem(ListItem):
    def __init__(self, article: Article):
        super().__init__()
        self.article = article

    def compose(self) -> ComposeResult:
        with Vertical(classes="article-card"):
            with Horizontal(classes="article-header"):
                yield Static(Text(self.article.category), classes="article-category")
                yield Static(Text(self.article.title), classes="article-title")
            yield Static(Text(self.article.summary), classes="article-summary")
            yield Static(
                Text(f"{self.article.author} · {time_ago(self.article.published_at)}"),
                classes="article-meta",
            )


class StatusBar(Static):
    loading_status = reactive("")
    keybinding_hint = reactive("")

    def on_mount(self) -> None:
        self.update_display()

    def set_keybindings(self, hint: str) -> None:
        """Set the keybinding hint text."""
        self.keybinding_hint = hint

    def update_display(self) -> None:
        """Update the status bar display."""
        status_items = []
        if self.loading_status:
            status_items.append(self.loading_status)

        if self.keybinding_hint:
            status_items.append(self.keybinding_hint)

        self.update(" | ".join(status_items))

    def watch_loading_status(self, loading_status: str) -> None:
        self.update_display()

    def watch_keybinding_hint(self, keybinding_hint: str) -> None:
        self.update_display()


class ErrorMessage(Static):
    def __init__(self, message: str):
        super().__init__(Text(message, style="bold red"))


class EmptyMessage(Static):
    def __init__(self, title: str, hint: str):
        text = Text(title, style="bold")
        text.append(f"\n{hint}", style="dim")
        super().__init__(text)
