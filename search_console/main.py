"""Application entrypoint: a line-oriented terminal front end for the console."""

from __future__ import annotations

import asyncio
import shlex
import webbrowser
from typing import Awaitable, Callable

import httpx

from search_console.config import get_settings
from search_console.domain.intents import (
    AcceptSuggestion,
    ActivateResult,
    ChangePage,
    ChangeSetting,
    EditTerm,
    Intent,
    RemoveItem,
    Submit,
)
from search_console.domain.models import ConsoleState
from search_console.logging import configure_logging, level_from_name, logger
from search_console.services.backend import SearchBackendClient
from search_console.services.console import SearchConsole
from search_console.services.exceptions import InvalidSettingError
from search_console.services.pagination import page_window
from search_console.services.suggestions import SuggestionEngine, load_corpus

HELP_TEXT = """\
Type a query and press Enter to search.
  :page N           jump to page N
  :next / :prev     move one page
  :set NAME VALUE   operator | results_per_page | sort_method | excluded_chars
  :type TEXT        preview the inline suggestion for TEXT
  :accept           accept the current suggestion
  :open N           open result N
  :rm N             remove result N as outdated
  :help             show this message
  :quit             exit"""

QUIT = "quit"

LineReader = Callable[[str], Awaitable[str]]
Writer = Callable[[str], None]


class CommandError(ValueError):
    pass


def _position(arg: str, state: ConsoleState) -> int:
    try:
        number = int(arg)
    except ValueError as exc:
        raise CommandError(f"Not a number: {arg}") from exc
    if not 1 <= number <= len(state.results):
        raise CommandError(f"No result #{number}")
    return number - 1


def parse_command(line: str, state: ConsoleState) -> Intent | str | None:
    """Translate one input line into an intent, ``QUIT``, ``"help"`` or ``None``."""

    text = line.strip()
    if not text:
        return None
    if not text.startswith(":"):
        return Submit(term=text)

    command, _, rest = text[1:].partition(" ")
    command = command.lower()
    rest = rest.strip()
    page = state.pagination.page_index

    if command in {"q", "quit", "exit"}:
        return QUIT
    if command == "help":
        return "help"
    if command == "next":
        return ChangePage(page_index=page + 1)
    if command == "prev":
        return ChangePage(page_index=page - 1)
    if command == "page":
        try:
            return ChangePage(page_index=int(rest) - 1)
        except ValueError as exc:
            raise CommandError(f"Not a page number: {rest!r}") from exc
    if command == "type":
        return EditTerm(term=rest)
    if command == "accept":
        return AcceptSuggestion()
    if command == "open":
        return ActivateResult(url=state.results[_position(rest, state)].url)
    if command == "rm":
        return RemoveItem(index=_position(rest, state))
    if command == "set":
        parts = shlex.split(rest)
        if len(parts) != 2:
            raise CommandError("Usage: :set NAME VALUE")
        name, value = parts
        if name == "results_per_page" and value.isdigit():
            return ChangeSetting(name=name, value=int(value))
        return ChangeSetting(name=name, value=value)
    raise CommandError(f"Unknown command: :{command}")


def render_state(state: ConsoleState) -> str:
    lines: list[str] = []
    if state.suggestion:
        lines.append(f"suggestion: {state.suggestion}")
    settings = state.settings
    lines.append(
        f"[{settings.operator.label} | {settings.results_per_page}/page | "
        f"{settings.sort_method.label}]"
    )

    status = state.status
    if status == "loading":
        lines.append("Loading results...")
    elif status == "no_results":
        lines.append("No results found for your query. Try different terms or operator.")
    elif status == "idle":
        lines.append("Enter a query to start searching.")
    else:
        for position, item in enumerate(state.results, start=1):
            lines.append(f"{position:>3}. {item.description}")
            lines.append(f"     {item.url}")
        pagination = state.pagination
        if pagination.total_pages > 1:
            current = pagination.current_page_one_indexed
            pages = " ".join(
                f"[{number}]" if number == current else str(number)
                for number in page_window(current, pagination.total_pages)
            )
            lines.append(f"pages: {pages}  ({current}/{pagination.total_pages})")
    return "\n".join(lines)


async def _read_line(prompt: str) -> str:
    return await asyncio.to_thread(input, prompt)


async def run_console(
    console: SearchConsole,
    *,
    read_line: LineReader = _read_line,
    write: Writer = print,
) -> None:
    write(HELP_TEXT)
    while True:
        try:
            line = await read_line("search> ")
        except EOFError:
            break
        try:
            intent = parse_command(line, console.state)
        except CommandError as exc:
            write(str(exc))
            continue
        if intent is None:
            continue
        if intent == QUIT:
            break
        if intent == "help":
            write(HELP_TEXT)
            continue
        try:
            state = await console.dispatch(intent)
        except InvalidSettingError as exc:
            write(str(exc))
            continue
        if isinstance(intent, ActivateResult):
            if state.last_navigation is None:
                write("This result has no link to open.")
            else:
                write(f"Opening {state.last_navigation}")
            continue
        write(render_state(state))


async def main() -> None:
    settings = get_settings()
    configure_logging(level_from_name(settings.log_level), log_format=settings.log_format)

    corpus_path = settings.suggestions.corpus_path
    corpus = load_corpus(corpus_path) if corpus_path else None
    suggestions = SuggestionEngine(corpus, min_length=settings.suggestions.min_length)

    async with httpx.AsyncClient() as http_client:
        backend = SearchBackendClient(http_client, settings.backend)
        console = SearchConsole(
            backend,
            settings=settings.defaults,
            suggestions=suggestions,
            navigator=webbrowser.open,
        )
        logger.info(
            "console_starting",
            environment=settings.environment,
            backend=str(settings.backend.base_url),
        )
        await run_console(console)


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
