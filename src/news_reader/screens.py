from __future__ import annotations

import webbrowser

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Header, Label, Markdown

from .config import logger
from .datamodels import Article
from .feed import NewsFeed
from .formatting import long_date
from .widgets import StatusBar


def article_markdown(article: Article) -> str:
    return (
        f"# {article.title}\n\n"
        f"**{article.category}** · {long_date(article.published_at)}\n\n"
        f"*By {article.author}*\n\n"
        f"> {article.summary}\n\n"
        "---\n\n"
        f"{article.content}\n"
    )


NOT_FOUND_MARKDOWN = (
    "# Article not found\n\n"
    "The article you are looking for is no longer available.\n\n"
    "Press **escape** to go back."
)


# --- Article screen (separate) ---
class ArticleDetailScreen(Screen):
    BINDINGS = [
        Binding("escape,q,b,left", "app.pop_screen", "Back"),
        Binding("o", "open_image", "Open image"),
        Binding("down", "scroll_down", "Scroll Down"),
        Binding("up", "scroll_up", "Scroll Up"),
    ]

    def __init__(self, article_id: str, feed: NewsFeed):
        super().__init__()
        self.article_id = article_id
        self.feed = feed
        self.article = feed.get_article(article_id)

    def compose(self) -> ComposeResult:
        yield Header()
        yield StatusBar()
        yield VerticalScroll(
            Markdown("", id="article-markdown"),
            id="article-scroll",
        )

    def on_mount(self) -> None:
        md = self.query_one("#article-markdown", Markdown)
        self.query_one("#article-scroll").focus()
        self.app.apply_theme_styles(self)

        if self.article is None:
            logger.warning("Article %s not found", self.article_id)
            self.title = "Article not found"
            md.update(NOT_FOUND_MARKDOWN)
            return

        self.title = self.article.title
        self.sub_title = f"~{self.article.reading_minutes} min read"
        md.update(article_markdown(self.article))

        keybinding_style = self.app.get_keybinding_style()
        hint = f"[b {keybinding_style}]up/down[/] to scroll"
        if self.article.image_url:
            hint += f", [b {keybinding_style}]o[/] to open image"
        self.query_one(StatusBar).set_keybindings(hint)

    def action_open_image(self) -> None:
        if self.article is None or not self.article.image_url:
            self.app.notify("This article has no image.", severity="warning")
            return
        webbrowser.open(self.article.image_url)

    def action_scroll_down(self) -> None:
        self.query_one("#article-scroll").scroll_down()

    def action_scroll_up(self) -> None:
        self.query_one("#article-scroll").scroll_up()


class ErrorScreen(Screen):
    BINDINGS = [
        Binding("q", "app.quit", "Quit"),
    ]

    def __init__(self, title: str, message: str):
        super().__init__()
        self.error_title = title
        self.message = message

    def compose(self) -> ComposeResult:
        yield Header()
        yield Label(self.error_title, classes="error-title")
        yield Markdown(self.message)
        yield Footer()

    def on_mount(self) -> None:
        self.title = self.error_title
