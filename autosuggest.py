#!/usr/bin/env python3
"""
Trie Auto-Suggest

Interactive prefix search over an in-memory word list. Loads the seed
dictionary into a prefix trie, then lets you search by prefix, add words,
and inspect statistics from a terminal menu.

For the browser version run: streamlit run app.py
"""

from __future__ import annotations

import argparse
import logging

from components.console import Renderer, run_console
from components.seed_words import build_seed_index


LOG_FORMAT = "[%(levelname)s] %(message)s"


# Entry point

def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Trie Auto-Suggest -- prefix-based word search",
    )
    parser.add_argument("--no-color", action="store_true",
                        help="Disable ANSI colors in terminal output")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
    )

    renderer = Renderer(color=not args.no_color)
    renderer.banner()
    renderer.info("Initializing system...")
    renderer.dim("Loading dictionary and building trie structure...")
    print()

    index, elapsed_ms = build_seed_index()
    renderer.success(f"System ready! Loaded {index.count()} words in {elapsed_ms:.3f}ms")

    run_console(index, renderer)


if __name__ == "__main__":
    main()
