from __future__ import annotations

from typing import Any, Dict, List, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.command import Hit, Hits, Provider
from textual.containers import Horizontal, Vertical
from textual.worker import Worker, WorkerState
from textual.widgets import (
    Header,
    Input,
    ListView,
    LoadingIndicator,
    Rule,
    Static,
)

from .config import UI_DEFAULTS, logger
from .datamodels import Article
from .feed import FeedEvent, NewsFeed
from .messages import FeedUpdated
from .screens import ArticleDetailScreen, ErrorScreen
from .themes import load_themes
from .widgets import ArticleItem, CategoryListItem, EmptyMessage, ErrorMessage, StatusBar


class ThemeProvider(Provider):
    async def search(self, query: str) -> Hits:
        """Search for a theme."""
        matcher = self.matcher(query)

        for theme_name in self.app.available_themes:
            score = matcher.match(theme_name)
            if score > 0:
                yield Hit(
                    score,
                    matcher.highlight(f"Switch to {theme_name} theme"),
                    lambda name=theme_name: self.app.action_switch_theme(name),
                )


class NewsApp(App):
    TITLE = "News Reader"
    SUB_TITLE = "Latest stories"

    CSS_PATH = "app.css"

    COMMANDS = App.COMMANDS | {ThemeProvider}

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("r", "refresh", "Refresh"),
        Binding("left", "nav_left", "Navigate Left"),
        Binding("right", "nav_right", "Navigate Right"),
        Binding("ctrl+p", "command_palette", "Commands"),
        Binding("ctrl+l", "toggle_left_pane", "Toggle Categories"),
        Binding("/", "focus_search", "Search"),
        Binding("escape", "clear_search", "Clear Search"),
    ]

    def __init__(
        self,
        feed: Optional[NewsFeed] = None,
        theme: Optional[str] = None,
        config: Optional[Dict[str, Any]] = None,
        startup_error: Optional[str] = None,
        **kwargs: Any,
    ):
        super().__init__(**kwargs)
        self.feed = feed
        self.config = config or {}
        self._theme_name = theme or self.config.get("theme") or "textual-dark"
        self.startup_error = startup_error
        self._unsubscribe = None

    @property
    def theme_name(self) -> str:
        return self._theme_name

    def get_keybinding_style(self) -> str:
        """Return the appropriate keybinding style for the current theme."""
        return "$accent"

    def apply_theme_styles(self, screen) -> None:
        """Apply theme-specific styles to a screen."""
        is_light = not self.current_theme.dark
        for widget in screen.query("Header, StatusBar, Footer"):
            widget.set_class(is_light, "light-chrome")

    def compose(self) -> ComposeResult:
        yield Header()
        # Main horizontal split: left = categories, right = articles
        with Horizontal(id="main"):
            with Vertical(id="left"):
                yield Static("Categories", classes="pane-title")
                yield ListView(id="categories-list")
            yield Rule(orientation="vertical")
            with Vertical(id="right"):
                yield Static("Articles", classes="pane-title")
                yield Input(placeholder="Search articles...", id="search-input")
                yield Vertical(id="articles-placeholder")
                yield ListView(id="articles-list")
        yield StatusBar()

    def on_mount(self) -> None:
        # Register bundled and user themes
        for theme in load_themes(self.config.get("themes")).values():
            self.register_theme(theme)

        if self._theme_name not in self.available_themes:
            logger.warning("Theme '%s' not found, falling back.", self._theme_name)
            self._theme_name = "textual-dark"
        self.theme = self._theme_name
        self.apply_theme_styles(self.screen)

        if self.feed is None:
            self.push_screen(
                ErrorScreen(
                    "No news source configured",
                    self.startup_error
                    or "Please configure a news source in `~/.config/news-reader/config.json`.",
                )
            )
            return

        self._unsubscribe = self.feed.subscribe(
            lambda event: self.post_message(FeedUpdated(event))
        )

        self.query_one("#articles-list", ListView).cursor_type = "row"
        try:
            self.query_one("#categories-list").focus()
        except Exception:
            pass

        keybindings_text = self.config.get("ui", {}).get(
            "statusbar_keybindings", UI_DEFAULTS["statusbar_keybindings"]
        )
        self.query_one(StatusBar).set_keybindings(
            keybindings_text.format(color=self.get_keybinding_style())
        )

        self._start_load()

    def on_unmount(self) -> None:
        if self._unsubscribe:
            self._unsubscribe()

    def _start_load(self) -> None:
        self.run_worker(self.feed.load_news(), name="articles_loader", exclusive=True)

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        if getattr(event.worker, "name", None) != "articles_loader":
            return
        # LoadError is handled by the feed; anything reaching here is unexpected.
        if event.state is WorkerState.ERROR:
            error = getattr(event.worker, "error", None)
            logger.error("Articles worker failed: %s", error)
            self.query_one(StatusBar).loading_status = "Error loading articles."
            if not self.feed.has_data:
                self._show_placeholder(ErrorMessage(f"Unexpected error: {error}"))

    # --- Feed events ---
    def on_feed_updated(self, message: FeedUpdated) -> None:
        event = message.event
        status = self.query_one(StatusBar)
        if event is FeedEvent.LOADING_STARTED:
            status.loading_status = "Loading articles..."
            # the last good collection stays visible during a refresh
            if not self.feed.has_data:
                self._show_placeholder(LoadingIndicator())
        elif event is FeedEvent.LOAD_FAILED:
            error = self.feed.error_message or "Failed to load news."
            logger.error(error)
            if self.feed.has_data:
                status.loading_status = "Refresh failed, showing previous articles."
                self.notify(error, severity="error")
            else:
                status.loading_status = "Error loading articles."
                self._show_placeholder(
                    ErrorMessage(error),
                    Static("Press [b]r[/] to try again.", classes="retry-hint"),
                )
        elif event is FeedEvent.LOAD_SUCCEEDED:
            status.loading_status = ""
            self._update_categories_list()
            self._update_articles_list(self.feed.visible)
        elif event is FeedEvent.QUERY_UPDATED:
            self._update_articles_list(self.feed.visible)
            self._update_sub_title()

    def _show_placeholder(self, *widgets) -> None:
        """Replace the articles list with loading, error or empty-state widgets."""
        placeholder = self.query_one("#articles-placeholder", Vertical)
        placeholder.remove_children()
        placeholder.mount(*widgets)
        placeholder.display = True
        articles_list = self.query_one("#articles-list", ListView)
        articles_list.clear()
        articles_list.display = False

    def _update_categories_list(self) -> None:
        view = self.query_one("#categories-list", ListView)
        view.clear()
        for category in self.feed.categories:
            view.append(CategoryListItem(category))

    def _update_articles_list(self, articles: List[Article]) -> None:
        if not articles:
            self._show_placeholder(
                EmptyMessage(
                    "No articles found",
                    "Try a different search term or category.",
                )
            )
            return

        placeholder = self.query_one("#articles-placeholder", Vertical)
        placeholder.remove_children()
        placeholder.display = False

        articles_list = self.query_one("#articles-list", ListView)
        articles_list.clear()
        for article in articles:
            articles_list.append(ArticleItem(article))
        articles_list.display = True

    def _update_sub_title(self) -> None:
        if self.feed.search_query:
            self.sub_title = f'Search: "{self.feed.search_query}"'
        else:
            self.sub_title = self.feed.selected_category

    # --- Interaction ---
    def on_list_view_selected(self, event: ListView.Selected) -> None:
        if event.list_view.id == "categories-list":
            if isinstance(event.item, CategoryListItem):
                self.feed.filter_by_category(event.item.category)
        elif event.list_view.id == "articles-list":
            if isinstance(event.item, ArticleItem):
                self._open_article(event.item.article)

    def _open_article(self, article: Article) -> None:
        self.push_screen(ArticleDetailScreen(article.id, self.feed))

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "search-input" and self.feed is not None:
            self.feed.search(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "search-input":
            self.query_one("#articles-list").focus()

    def action_refresh(self) -> None:
        if self.feed is not None and not self.feed.is_loading:
            self._start_load()

    def action_nav_left(self) -> None:
        try:
            if self.query_one("#articles-list").has_focus:
                self.query_one("#categories-list").focus()
        except Exception:
            pass

    def action_nav_right(self) -> None:
        articles_list = self.query_one("#articles-list", ListView)
        if articles_list.has_focus:
            item = articles_list.highlighted_child
            if isinstance(item, ArticleItem):
                self._open_article(item.article)
        else:
            try:
                if self.query_one("#categories-list").has_focus:
                    articles_list.focus()
            except Exception:
                pass

    def action_focus_search(self) -> None:
        """Focus the search input."""
        self.query_one("#search-input").focus()

    def action_clear_search(self) -> None:
        search_input = self.query_one("#search-input", Input)
        if search_input.value:
            # on_input_changed resets the feed search
            search_input.value = ""

    def action_switch_theme(self, theme: str) -> None:
        """Switch to a new theme."""
        self.theme = theme
        self._theme_name = theme

    def watch_theme(self, old_theme: str, new_theme: str) -> None:
        """Apply theme-specific styles."""
        for screen in self.screen_stack:
            self.apply_theme_styles(screen)

    def action_toggle_left_pane(self) -> None:
        """Toggle the left pane."""
        left_pane = self.query_one("#left")
        left_pane.display = not left_pane.display
