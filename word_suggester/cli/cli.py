"""
cli.py - interactive word suggestion assistant
Features:
- Build the vocabulary from typed "word[:freq]" entries or a word file
- Prefix search with spell-correction fallback when nothing matches
- Alphabetical listing of every stored word
- Uses Rich for tables and formatting
"""

import argparse
from typing import List, Optional, TextIO, Tuple

# ui styling with Rich
from rich import box
from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table

from word_suggester.core.suggester import Suggester
from word_suggester.exceptions import InvalidInput
from word_suggester.parsing import parse_entry, read_entries, validate_word
from word_suggester.utils.config_manager import Config
from word_suggester.utils.logger_utils import Log, configure_logging, logger

MENU = ("Search by prefix", "Show all words", "Exit")


class CLI:
    """Command-line interface: builds a Suggester, then runs the query menu."""

    def __init__(
        self,
        cfg: Optional[Config] = None,
        console: Optional[Console] = None,
        stream: Optional[TextIO] = None,
    ):
        """
        cfg: limits and thresholds (defaults if omitted)
        console: rich console to render to
        stream: read answers from this file object instead of the terminal
        """
        self.cfg = cfg or Config()
        self.console = console or Console()
        self.stream = stream
        self.suggester = Suggester.from_config(self.cfg)
        self.running = True

    def _ask(self, prompt: str) -> str:
        if self.stream is None:
            return Prompt.ask(prompt, console=self.console).strip()
        # a blank line comes back as "\n", only end of input is ""
        self.console.print(f"{prompt}: ", end="")
        line = self.stream.readline()
        if line == "":
            raise EOFError
        return line.strip()

    # VOCABULARY -------------------------------------------------------------------
    def load_file(self, path: str) -> int:
        with open(path, "r", encoding="utf8") as f, Log.time_block("load"):
            count = self.suggester.load(read_entries(f, self.cfg.get("max_word_length")))
        self.console.print(f"[dim]Loaded {count} words from {path}.[/dim]")
        return count

    def read_vocabulary(self) -> int:
        """Prompt for the word count, then for that many word[:freq] entries."""
        max_words = self.cfg.get("max_words")
        while True:
            raw = self._ask(f"How many words do you want to enter? (1-{max_words})")
            if raw.isdigit() and 1 <= int(raw) <= max_words:
                n = int(raw)
                break
            self.console.print(f"[red]Invalid input.[/red] Enter a number between 1 and {max_words}.")

        self.console.print("Enter words with optional frequency ([cyan]word:freq[/cyan]):")
        entries: List[Tuple[str, int]] = []
        while len(entries) < n:
            for token in self._ask(f"Word {len(entries) + 1}/{n}").split():
                if len(entries) == n:
                    break
                try:
                    entries.append(parse_entry(token, self.cfg.get("max_word_length")))
                except InvalidInput as e:
                    self.console.print(f"[red]Invalid word[/red] {token!r}: {e}. Try again.")

        with Log.time_block("load"):
            return self.suggester.load(entries)

    # MENU -------------------------------------------------------------------------
    def run(self):
        """Main menu loop until Exit or end of input."""
        self.console.rule("[bold magenta]Trie-Based Word Suggestion System[/bold magenta]")
        try:
            if not len(self.suggester):
                self.read_vocabulary()
            while self.running:
                self._show_menu()
                self._handle_choice(self._ask("Choose an option"))
        except (EOFError, KeyboardInterrupt):
            self._exit()

    def _show_menu(self):
        self.console.print("\n[bold]Menu:[/bold]")
        for i, label in enumerate(MENU, 1):
            self.console.print(f"{i}. {label}")

    def _handle_choice(self, choice: str):
        if choice == "1":
            self.search(self._ask("Enter prefix to search"))
        elif choice == "2":
            self.show_all()
        elif choice == "3":
            self._exit()
        else:
            self.console.print("[red]Invalid choice.[/red] Try again.")

    # QUERIES ----------------------------------------------------------------------
    def search(self, prefix: str):
        try:
            validate_word(prefix, self.cfg.get("max_word_length"))
        except InvalidInput:
            self.console.print("[red]Invalid prefix.[/red] Only letters allowed.")
            return

        with Log.time_block("query"):
            result = self.suggester.suggest(prefix)

        if result.kind == "prefix":
            self._display(f'Suggestions for "{prefix}"', "Frequency", result.items)
            return

        self.console.print(
            f'No words with prefix "{prefix}". [yellow]Trying spell correction...[/yellow]'
        )
        if not result:
            self.console.print("No similar words found.")
            return
        self._display("Did you mean", "Distance", result.items)

    def show_all(self):
        words = self.suggester.build_dictionary_snapshot(sort=True)
        table = Table(title="All words", box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Word", style="bold")
        for i, (w, _freq) in enumerate(words, 1):
            table.add_row(str(i), w)
        self.console.print(table)

    # DISPLAY ----------------------------------------------------------------------
    def _display(self, title: str, metric: str, rows: List[Tuple[str, int]]):
        table = Table(title=title, box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Word", style="bold")
        table.add_column(metric, justify="right", style="magenta")
        for i, (w, value) in enumerate(rows, 1):
            table.add_row(str(i), w, str(value))
        self.console.print(table)

    def _exit(self):
        self.console.rule("[red]Exiting[/red]")
        self.running = False


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="word_suggester",
        description="Trie-based word completion with spell correction.",
    )
    p.add_argument("--words", metavar="FILE", help="load word[:freq] entries from FILE")
    p.add_argument("--config", default="config.json", help="JSON config file (default: %(default)s)")
    p.add_argument("--log-level", help="override the configured log level")
    p.add_argument("--log-file", help="append logs to this file instead of stderr")
    p.add_argument("--show-config", action="store_true", help="print the effective settings and exit")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = Config(args.config)
    if args.show_config:
        console = Console()
        for line in cfg.show():
            console.print(line, markup=False)
        return 0

    try:
        configure_logging(args.log_level or cfg.get("log_level"), args.log_file)
        cli = CLI(cfg)
    except (OSError, ValueError) as e:
        logger.error("cannot start: %s", e)
        return 2

    if args.words:
        try:
            cli.load_file(args.words)
        except OSError as e:
            logger.error("cannot read %s: %s", args.words, e)
            return 1
    cli.run()
    return 0
