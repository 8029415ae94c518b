"""Interactive console driver for the auto-suggest index."""

from __future__ import annotations

import logging
import time

from components.index_stats import summarize
from tries.prefix_index import PrefixIndex, has_letters

log = logging.getLogger("autosuggest.console")

WIDTH = 54

MENU_OPTIONS = [
    "Search for Suggestions",
    "Add New Word",
    "View Statistics",
    "Help & Documentation",
    "Exit Program",
]


class Renderer:
    """ANSI-colored terminal output. Colors can be switched off entirely."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    CYAN = "\033[36m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    RED = "\033[31m"

    def __init__(self, color: bool = True):
        self.color = color

    def paint(self, text: str, *codes: str) -> str:
        if not self.color or not codes:
            return text
        return "".join(codes) + text + self.RESET

    def line(self, char: str = "-") -> None:
        print("  " + self.paint(char * WIDTH, self.DIM))

    def thick_line(self) -> None:
        print("  " + self.paint("=" * WIDTH, self.BOLD, self.CYAN))

    def success(self, msg: str) -> None:
        print("  " + self.paint("✓", self.GREEN, self.BOLD) + " " + self.paint(msg, self.GREEN))

    def error(self, msg: str) -> None:
        print("  " + self.paint("✗", self.RED, self.BOLD) + " " + self.paint(msg, self.RED))

    def info(self, msg: str) -> None:
        print("  " + self.paint("ℹ " + msg, self.BLUE))

    def dim(self, msg: str) -> None:
        print("  " + self.paint(msg, self.DIM))

    def heading(self, title: str, *codes: str) -> None:
        print("\n  " + self.paint(title, self.BOLD, *codes) + "\n")

    def banner(self) -> None:
        inner = WIDTH - 2
        rows = [
            "╔" + "═" * inner + "╗",
            "║" + " " * inner + "║",
            "║" + "TRIE AUTO-SUGGEST SYSTEM".center(inner) + "║",
            "║" + "Prefix-Based Word Search".center(inner) + "║",
            "║" + " " * inner + "║",
            "╚" + "═" * inner + "╝",
        ]
        print()
        for row in rows:
            print("  " + self.paint(row, self.BOLD, self.CYAN))
        print()

    def menu(self) -> None:
        print()
        self.thick_line()
        self.heading("SELECT AN OPTION:", self.YELLOW)
        for i, label in enumerate(MENU_OPTIONS, start=1):
            print(f"    {self.paint(f'[{i}]', self.BOLD, self.CYAN)}  {label}")
        print()
        self.thick_line()


def prompt(renderer: Renderer, text: str) -> str:
    return input("\n  " + renderer.paint(text, renderer.YELLOW))


def show_suggestions(index: PrefixIndex, renderer: Renderer, prefix: str) -> list[str]:
    """Query `prefix` and print the numbered, sorted suggestions."""
    t0 = time.perf_counter()
    suggestions = index.query(prefix)
    elapsed_us = (time.perf_counter() - t0) * 1_000_000
    log.debug("query %r -> %d results in %.1fus", prefix, len(suggestions), elapsed_us)

    print()
    if not suggestions:
        renderer.error(f'No suggestions found for "{prefix}"')
        renderer.dim("Try a different prefix or check spelling.")
        return suggestions

    n = len(suggestions)
    renderer.thick_line()
    print()
    print("  " + renderer.paint(f"✓ Found {n} match{'es' if n > 1 else ''}", renderer.BOLD, renderer.GREEN)
          + renderer.paint(f" (in {elapsed_us:.0f}μs)", renderer.DIM))
    print()
    renderer.line()
    print()
    for i, word in enumerate(suggestions, start=1):
        print(f"    {renderer.paint(f'[{i:>2}]', renderer.DIM)}  {renderer.paint(word, renderer.CYAN)}")
    print()
    renderer.thick_line()
    return suggestions


def add_word(index: PrefixIndex, renderer: Renderer, word: str) -> bool:
    """Insert `word`, reporting whether the dictionary grew."""
    print()
    if not word.strip(" \t\n\r"):
        renderer.error("Cannot add empty word. Please try again.")
        return False
    if not has_letters(word):
        renderer.error(f'Cannot add "{word}": word must contain at least one letter (a-z).')
        return False

    before = index.count()
    index.insert(word)
    after = index.count()
    if after > before:
        log.debug("inserted %r (%d words)", word, after)
        renderer.success(f'Successfully added "{word}" to dictionary!')
        renderer.dim(f"Dictionary now contains {after} words.")
        return True
    renderer.info(f'Word "{word}" already exists in dictionary.')
    return False


def show_statistics(index: PrefixIndex, renderer: Renderer) -> None:
    stats = summarize(index)
    rows = [
        ("Total Words:", renderer.paint(str(stats["words"]), renderer.BOLD)),
        ("Trie Nodes:", str(stats["nodes"])),
        ("Branching Factor:", f"{stats['avg_branch_factor']:.2f}"),
        ("Word Length:", f"{stats['length_min']}-{stats['length_max']} "
                         f"(mean {stats['length_mean']:.2f})"),
        ("Data Structure:", "Trie (Prefix Tree)"),
        ("Search Algorithm:", "Prefix Matching + DFS Traversal"),
        ("Result Sorting:", "Alphabetical"),
    ]
    print()
    renderer.thick_line()
    renderer.heading("SYSTEM STATISTICS", renderer.MAGENTA)
    renderer.line()
    print()
    for label, value in rows:
        print(f"  {renderer.paint(f'{label:<20}', renderer.CYAN)}{value}")
    print()
    renderer.line()
    print()
    renderer.dim("Tip: Press Enter at search prompt to view all words")
    print()
    renderer.thick_line()


def show_help(renderer: Renderer) -> None:
    print()
    renderer.thick_line()
    renderer.heading("HELP & DOCUMENTATION", renderer.MAGENTA)
    renderer.line()
    renderer.heading("How to Use:", renderer.CYAN)
    print("    • Enter any prefix to see matching words")
    print("    • Press Enter (empty) to display all words")
    print('    • Search is case-insensitive: "AP" = "ap"')
    print("    • Add words dynamically during runtime")
    print()
    renderer.line()
    renderer.heading("Examples:", renderer.CYAN)
    examples = [
        ('"ap"', "apartment, app, apple, appetite, apply, apricot"),
        ('"ba"', "badge, balance, ball, banana, bat, battle"),
        ('""  ', "Displays all dictionary words"),
    ]
    for shown, result in examples:
        print(f"    Prefix: {renderer.paint(shown, renderer.YELLOW)}  →  {result}")
    print()
    renderer.line()
    renderer.heading("Complexity Analysis:", renderer.CYAN)
    print(f"    • Insert:  {renderer.paint('O(L)', renderer.GREEN)} - L = word length")
    print(f"    • Search:  {renderer.paint('O(L + K×M)', renderer.GREEN)} - K = results, M = avg length")
    print(f"    • Space:   {renderer.paint('O(N×M)', renderer.GREEN)} - N = words, M = avg length")
    print()
    renderer.thick_line()


def run_console(index: PrefixIndex, renderer: Renderer | None = None) -> None:
    """Run the interactive menu loop until Exit, EOF or Ctrl-C."""
    if renderer is None:
        renderer = Renderer()

    while True:
        renderer.menu()
        try:
            raw = prompt(renderer, "→ Your choice: ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        try:
            choice = int(raw.strip())
        except ValueError:
            print()
            renderer.error("Invalid input. Please enter a number between 1-5.")
            continue

        try:
            if choice == 1:
                prefix = prompt(renderer, "→ Enter search prefix (or press Enter to show all): ")
                show_suggestions(index, renderer, prefix)
            elif choice == 2:
                word = prompt(renderer, "→ Enter new word to add: ")
                add_word(index, renderer, word)
            elif choice == 3:
                show_statistics(index, renderer)
            elif choice == 4:
                show_help(renderer)
            elif choice == 5:
                break
            else:
                print()
                renderer.error("Invalid choice. Please select a number between 1-5.")
        except (EOFError, KeyboardInterrupt):
            print()
            break

    print()
    renderer.thick_line()
    print()
    renderer.success("Thank you for using Trie Auto-Suggest System!")
    renderer.dim("Session terminated. Goodbye!")
    print()
    renderer.thick_line()
