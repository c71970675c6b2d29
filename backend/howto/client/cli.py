"""
howto - command line front end for the HowTo backend

    howto search "tie a tie" [--language es] [--save]
    howto ask "tie a tie" "what about a bow tie?"
    howto saved [list | show ID | delete ID]
    howto settings [--language CODE] [--dark-mode on|off]
    howto trending
"""

import argparse
import logging
import sys
from typing import Callable, Optional, Sequence, TextIO

from howto.client.api_client import ApiError, HowToClient
from howto.client.config import ClientSettings
from howto.client.preferences import Preferences
from howto.client.saved_tutorials import SavedTutorialStore, TutorialDraft
from howto.client.steps import extract_steps
from howto.client.storage import LocalStorage
from howto.common.exceptions import ValidationError
from howto.common.i18n import SUPPORTED_LANGUAGES, Translator
from howto.common.logging_config import setup_logging
from howto.domains.search.schemas import SearchResponse

logger = logging.getLogger(__name__)

TRENDING_SEARCHES = [
    "How to tie a tie",
    "How to cook rice",
    "How to change a tire",
    "How to fix a leaky faucet",
    "How to bake a cake",
    "How to learn guitar",
    "How to start a garden",
    "How to meditate",
]

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INVALID = 2


class App:
    """Wires client storage, preferences and the API client for one invocation."""

    def __init__(
        self,
        settings: ClientSettings,
        out: TextIO = sys.stdout,
        client_factory: Optional[Callable[[], HowToClient]] = None,
    ):
        self.settings = settings
        self.out = out
        self.storage = LocalStorage(settings.storage_path)
        self.preferences = Preferences.load(self.storage)
        self.saved = SavedTutorialStore(self.storage)
        self._client_factory = client_factory or (
            lambda: HowToClient(settings.api_url, timeout=settings.timeout_seconds)
        )

    @property
    def t(self) -> Callable[[str], str]:
        return Translator(self.preferences.language).t

    def echo(self, text: str = "") -> None:
        print(text, file=self.out)

    # -- commands -----------------------------------------------------------

    def search(self, query: str, language: Optional[str], save: bool) -> int:
        language = language or self.preferences.language
        with self._client_factory() as client:
            result = client.search(query, language)

        self._render_results(query, result)

        if save:
            tutorial = self.saved.save(TutorialDraft(
                title=f"How to {query.strip()}",
                query=query.strip(),
                summary=result.summary,
            ))
            self.echo(f"[{self.t('results.saved')}]" + (f" {tutorial.id}" if tutorial else ""))
        elif self.saved.is_saved(query.strip()):
            self.echo(f"[{self.t('results.saved')}]")
        return EXIT_OK

    def ask(self, original: str, question: str, language: Optional[str]) -> int:
        with self._client_factory() as client:
            answer = client.follow_up(original, question, language or self.preferences.language)
        self.echo(f"## {question}")
        self.echo()
        self.echo(answer.answer)
        return EXIT_OK

    def saved_list(self) -> int:
        tutorials = self.saved.list()
        self.echo(self.t("saved.myTutorials"))
        if not tutorials:
            self.echo(self.t("saved.empty"))
            return EXIT_OK
        for item in tutorials:
            self.echo(f"  {item.id}  {item.title}  ({self.t('saved.savedDate')} {item.date_saved})")
        return EXIT_OK

    def saved_show(self, tutorial_id: str) -> int:
        tutorial = self.saved.get_by_id(tutorial_id)
        if tutorial is None:
            self.echo(self.t("saved.notFound"))
            return EXIT_ERROR
        self.echo(tutorial.title)
        self.echo()
        self._render_summary(tutorial.summary)
        return EXIT_OK

    def saved_delete(self, tutorial_id: str) -> int:
        if not self.saved.delete(tutorial_id):
            self.echo(self.t("saved.notFound"))
            return EXIT_ERROR
        self.echo(self.t("saved.deleted"))
        return EXIT_OK

    def configure(self, language: Optional[str], dark_mode: Optional[str]) -> int:
        if language is not None:
            self.preferences.set_language(language)
        if dark_mode is not None:
            self.preferences.set_dark_mode(dark_mode == "on")
        state = self.t("settings.on") if self.preferences.dark_mode else self.t("settings.off")
        self.echo(self.t("settings.settings"))
        self.echo(f"  {self.t('settings.language')}: {self.preferences.language}")
        self.echo(f"  {self.t('settings.darkMode')}: {state}")
        return EXIT_OK

    def trending(self) -> int:
        self.echo(self.t("home.trending"))
        for item in TRENDING_SEARCHES:
            self.echo(f"  {item}")
        return EXIT_OK

    # -- rendering ----------------------------------------------------------

    def _render_summary(self, summary: str) -> None:
        extraction = extract_steps(summary)
        if not extraction.has_steps:
            self.echo(summary.strip())
            return
        if extraction.intro:
            self.echo(extraction.intro)
            self.echo()
        for number, step in enumerate(extraction.steps, 1):
            self.echo(f"{self.t('results.step')} {number}: {step}")

    def _render_results(self, query: str, result: SearchResponse) -> None:
        self.echo(f"{self.t('results.resultsFor')} {query.strip()}")
        self.echo()
        self.echo(f"== {self.t('results.aiSummary')} ==")
        self._render_summary(result.summary)
        self.echo()
        self.echo(f"== {self.t('results.videos')} ==")
        if not result.videos:
            self.echo(self.t("results.noVideos"))
        for video in result.videos:
            self.echo(f"  {video.title} - {video.channel}")
            self.echo(f"    {video.url}")
        self.echo()
        self.echo(f"== {self.t('results.articles')} ==")
        if not result.articles:
            self.echo(self.t("results.noArticles"))
        for article in result.articles:
            self.echo(f"  {article.title} ({article.website})")
            self.echo(f"    {article.url}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="howto", description="Find how-to videos, articles and AI guides")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_search = sub.add_parser("search", help="Search a how-to question")
    p_search.add_argument("query", nargs="+")
    p_search.add_argument("--language", "-l", choices=SUPPORTED_LANGUAGES)
    p_search.add_argument("--save", action="store_true", help="Save the guide locally")

    p_ask = sub.add_parser("ask", help="Ask a follow-up question")
    p_ask.add_argument("original")
    p_ask.add_argument("question")
    p_ask.add_argument("--language", "-l", choices=SUPPORTED_LANGUAGES)

    p_saved = sub.add_parser("saved", help="Manage saved tutorials")
    p_saved.add_argument("action", nargs="?", default="list", choices=["list", "show", "delete"])
    p_saved.add_argument("id", nargs="?")

    p_settings = sub.add_parser("settings", help="Show or change preferences")
    p_settings.add_argument("--language", "-l")
    p_settings.add_argument("--dark-mode", choices=["on", "off"])

    sub.add_parser("trending", help="Show example questions")
    return parser


def run(app: App, args: argparse.Namespace) -> int:
    if args.command == "search":
        return app.search(" ".join(args.query), args.language, args.save)
    if args.command == "ask":
        return app.ask(args.original, args.question, args.language)
    if args.command == "saved":
        if args.action == "list":
            return app.saved_list()
        if not args.id:
            app.echo(f"saved {args.action}: missing tutorial id")
            return EXIT_INVALID
        if args.action == "show":
            return app.saved_show(args.id)
        return app.saved_delete(args.id)
    if args.command == "settings":
        return app.configure(args.language, args.dark_mode)
    return app.trending()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(log_level="DEBUG" if args.verbose else "WARNING")

    app = App(ClientSettings())
    try:
        return run(app, args)
    except ValidationError as e:
        app.echo(f"{app.t('results.errorTitle')}: {e.message}")
        return EXIT_INVALID
    except ApiError as e:
        app.echo(f"{app.t('results.searchError')}: {e.message}")
        if e.retryable:
            app.echo(app.t("results.retry"))
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
