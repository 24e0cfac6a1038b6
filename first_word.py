#!/usr/bin/env python3
"""first_word.py

Finds the best opening word for a word list: the word whose letters are the
most common in their slots across the whole list, with repeated letters
penalised the same way the solver in wordle.py ranks its suggestions.

Usage:
  python3 first_word.py words.txt
  python3 first_word.py words.txt --top 10
"""

from __future__ import annotations

import argparse
from typing import List, Optional, Sequence, Tuple

import tqdm

import wordle
from wordle import Word


def best_opening_words(
    dictionary: Sequence[Word],
    top: int = 1,
    *,
    show_progress: bool = False,
) -> List[Tuple[Word, int]]:
    """Return the ``top`` highest scoring (word, score) pairs; ties keep list order."""
    histogram = wordle.build_letter_histogram(dictionary)
    iterator = tqdm.tqdm(dictionary, desc="Scoring words", unit="word") if show_progress else dictionary
    scored = [(w, wordle.score_word(w, histogram)) for w in iterator]
    # sort is stable, so the earliest of several equal scores stays first
    scored.sort(key=lambda x: x[1], reverse=True)
    return scored[:top]


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Find the best opening Wordle guess for a word list.")
    ap.add_argument("words", nargs="?", default=None,
                    help=f"Word list (5-letter words, one per line). Default: {wordle.DEFAULT_WORD_LIST}")
    ap.add_argument("--top", type=int, default=1, help="How many opening words to print.")
    ap.add_argument("--no-progress", action="store_true", help="Disable progress bars.")
    args = ap.parse_args(argv)

    dictionary = wordle.load_dictionary(args.words)
    best = best_opening_words(dictionary, top=max(args.top, 1), show_progress=not args.no_progress)

    word, score = best[0]
    print(f"Best opening word: {wordle.format_word(word)} (score {score})")
    if len(best) > 1:
        print("\nTop opening words (word | score):")
        for w, s in best:
            print(f"  {wordle.format_word(w)}  |  {s}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
