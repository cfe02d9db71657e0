"""
cli.py - command line front end for the fuzzy index
Features:
- One-shot commands: search (BK-tree), suggest (prefix), fuzzy (typo-tolerant), stats, config
- Interactive shell with slash commands and live suggestions for plain input
- Uses Rich for tables and formatting

Usage:
  fuzzy-index words.txt search brigadero -k 2
  fuzzy-index words.txt suggest bri -n 5
  fuzzy-index words.txt fuzzy brigadero --prefix br
  fuzzy-index words.txt config
  fuzzy-index words.txt shell
"""

import argparse
import sys
from typing import List, Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from fuzzy_index.core.distance import METRICS
from fuzzy_index.core.matcher import FuzzyMatcher
from fuzzy_index.core.protocols import FuzzySuggestion, Match, Suggestion
from fuzzy_index.utils.config_manager import Config
from fuzzy_index.utils.logger_utils import Log
from fuzzy_index.utils.timing import timed

# initialise console for rich output
console = Console()


# rendering -----------------------------------------------------------------
def _footer(count: int, elapsed_ms: float) -> None:
    console.print(f"[dim]{count} result(s) in {elapsed_ms:.2f} ms[/dim]")


def print_matches(matches: List[Match], elapsed_ms: float) -> None:
    table = Table(title="similar words")
    table.add_column("word", style="cyan")
    table.add_column("distance", justify="right")
    for m in matches:
        table.add_row(m.word, str(m.distance))
    console.print(table)
    _footer(len(matches), elapsed_ms)


def print_suggestions(suggestions: List[Suggestion], elapsed_ms: float) -> None:
    table = Table(title="completions")
    table.add_column("word", style="cyan")
    table.add_column("frequency", justify="right")
    for s in suggestions:
        table.add_row(s.word, str(s.frequency))
    console.print(table)
    _footer(len(suggestions), elapsed_ms)


def print_fuzzy(suggestions: List[FuzzySuggestion], elapsed_ms: float) -> None:
    table = Table(title="fuzzy suggestions")
    table.add_column("word", style="cyan")
    table.add_column("distance", justify="right")
    table.add_column("frequency", justify="right")
    for s in suggestions:
        table.add_row(s.word, str(s.distance), str(s.frequency))
    console.print(table)
    _footer(len(suggestions), elapsed_ms)


def print_stats(matcher: FuzzyMatcher) -> None:
    table = Table(title="index")
    table.add_column("stat")
    table.add_column("value", justify="right")
    for k, v in matcher.stats().items():
        table.add_row(k, str(v))
    console.print(table)


# interactive shell ------------------------------------------------------------
class Shell:
    """
    Slash-command loop over a loaded matcher.
    Plain input shows completions, falling back to fuzzy suggestions when
    nothing starts with it.
    """

    HELP = "Commands: /search WORD [K]  /suggest PREFIX [N]  /fuzzy WORD [K] [N]  /stats  /config  /quit"

    def __init__(self, matcher: FuzzyMatcher):
        self.matcher = matcher
        self.running = True

    def run(self) -> None:
        console.rule("[bold magenta]Fuzzy Index[/bold magenta]")
        console.print(f"[cyan]{self.matcher.size()} words loaded.[/cyan]")
        console.print(self.HELP + "\n")

        while self.running:
            try:
                line = Prompt.ask("[green]query[/green]", default="")
            except (EOFError, KeyboardInterrupt):
                break
            line = line.strip()
            if not line:
                continue
            if line.startswith("/"):
                self.handle_command(line)
            else:
                self.complete(line)

    def handle_command(self, line: str) -> None:
        cmd, *args = line.split()
        try:
            if cmd in ("/quit", "/exit"):
                self.running = False
            elif cmd == "/search" and args:
                k = int(args[1]) if len(args) > 1 else None
                print_matches(*timed(self.matcher.similar)(args[0], k))
            elif cmd == "/suggest" and args:
                n = int(args[1]) if len(args) > 1 else None
                print_suggestions(*timed(self.matcher.complete)(args[0], n))
            elif cmd == "/fuzzy" and args:
                k = int(args[1]) if len(args) > 1 else None
                n = int(args[2]) if len(args) > 2 else None
                print_fuzzy(*timed(self.matcher.fuzzy_complete)(args[0], k, n))
            elif cmd == "/stats":
                print_stats(self.matcher)
            elif cmd == "/config":
                self.matcher.config.show(console)
            else:
                console.print(f"[yellow]Unknown command:[/yellow] {escape(line)}")
                console.print(self.HELP)
        except ValueError:
            console.print(f"[red]Numbers expected in:[/red] {escape(line)}")

    def complete(self, text: str) -> None:
        results, ms = timed(self.matcher.complete)(text)
        if results:
            print_suggestions(results, ms)
            return
        print_fuzzy(*timed(self.matcher.fuzzy_complete)(text))


# entry point -----------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="fuzzy-index",
        description="Typo-tolerant search and autocomplete over a word list.",
    )
    p.add_argument("vocab", help="vocabulary file: one word per line, optional TAB weight")
    p.add_argument("--config", default="config.json", help="JSON config file")
    p.add_argument("--metric", choices=sorted(METRICS), help="override the configured metric")

    sub = p.add_subparsers(dest="command", required=True)

    s = sub.add_parser("search", help="words within K edits (BK-tree)")
    s.add_argument("query")
    s.add_argument("-k", "--max-distance", type=int)

    g = sub.add_parser("suggest", help="completions of a prefix, most frequent first")
    g.add_argument("prefix")
    g.add_argument("-n", "--limit", type=int)

    f = sub.add_parser("fuzzy", help="typo-tolerant suggestions")
    f.add_argument("query")
    f.add_argument("-k", "--max-distance", type=int)
    f.add_argument("-n", "--limit", type=int)
    f.add_argument("--prefix", help="only scan words under this prefix")

    sub.add_parser("stats", help="index statistics")
    sub.add_parser("config", help="show the effective settings")
    sub.add_parser("shell", help="interactive session")
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    cfg = Config(args.config)
    if args.metric:
        cfg.set("metric", args.metric, save=False)
    try:
        log = Log(path=cfg["log_path"], level=cfg["log_level"], echo=False)
    except ValueError as e:
        console.print(f"[red]error:[/red] {escape(args.config)}: {escape(str(e))}")
        return 1
    if cfg.load_error:
        log.warning(cfg.load_error)
        console.print(f"[yellow]warning:[/yellow] {escape(cfg.load_error)} (using defaults)")

    try:
        matcher = FuzzyMatcher.from_file(args.vocab, config=cfg, log=log)
    except (OSError, ValueError) as e:
        log.error(f"[cli] failed to load {args.vocab}: {e}")
        console.print(f"[red]error:[/red] {escape(str(e))}")
        return 1

    if args.command == "search":
        print_matches(*timed(matcher.similar)(args.query, args.max_distance))
    elif args.command == "suggest":
        print_suggestions(*timed(matcher.complete)(args.prefix, args.limit))
    elif args.command == "fuzzy":
        print_fuzzy(
            *timed(matcher.fuzzy_complete)(
                args.query, args.max_distance, args.limit, args.prefix
            )
        )
    elif args.command == "stats":
        print_stats(matcher)
    elif args.command == "config":
        cfg.show(console)
    elif args.command == "shell":
        Shell(matcher).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
