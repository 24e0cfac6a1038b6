#!/usr/bin/env python3
"""
wordle.py

A Wordle helper that narrows a word list with the feedback from each guess and
ranks the words that are left by how common their letters are in each slot.
You play Wordle elsewhere; after each guess you type the feedback here.

Feedback formats (--protocol):
- letters: two lines, the green letters of your guess, then the yellow ones
  Example: Green: "an"  Yellow: "c"
- pattern: 5 letters of g (green), y (yellow), b (black/gray)
  Example: "bygyb"

Word list:
- One 5-letter word per line. Defaults to database.txt in the current
  directory, or pass a path as the only positional argument.

Usage:
  python3 wordle.py words.txt
  python3 wordle.py words.txt --protocol pattern
"""

import argparse
import re
import sys
from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Optional, Sequence, Set, Tuple, Union


N_LETTERS = 5
MAX_ATTEMPTS = 6
DEFAULT_WORD_LIST = "database.txt"

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

Word = Tuple[str, ...]  # N_LETTERS uppercase letters, only built by parse_word
LetterHistogram = Tuple[Tuple[int, ...], ...]  # counts[slot][letter]

_WORD_RE = re.compile(rf"[A-Z]{{{N_LETTERS}}}")


class LetterResult(IntEnum):
    NON_MEMBER = 0
    MISPLACED = 1
    CORRECT = 2


Results = Tuple[LetterResult, ...]
ALL_CORRECT: Results = (LetterResult.CORRECT,) * N_LETTERS


# parse_word converts text like 'panic' into a Word, or None if it isn't exactly 5 letters A-Z
def parse_word(text: str) -> Optional[Word]:
    s = text.upper()
    if not _WORD_RE.fullmatch(s):
        return None
    return tuple(s)


def format_word(word: Word) -> str:
    return "".join(word)


def letter_idx(letter: str) -> int:
    return ord(letter) - ord("A")


# load_words_from_file loads the 5-letter words of a file, one per line, skipping anything else
def load_words_from_file(path: str) -> List[Word]:
    words: List[Word] = []
    # undecodable bytes become U+FFFD, so a corrupt line never parses as a different word
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        for line in f:
            w = parse_word(line.strip())
            if w is not None:
                words.append(w)
    # Deduplicate while keeping order
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


# load_dictionary loads the word list given on the command line (or the default one)
# and exits with a message when there is nothing usable to load
def load_dictionary(path: Optional[str]) -> List[Word]:
    src = path if path is not None else DEFAULT_WORD_LIST
    try:
        words = load_words_from_file(src)
    except FileNotFoundError:
        if path is None:
            raise SystemExit(f"{src} not found, please specify a word list on the command line!")
        raise SystemExit(f"Word list not found: {src}")
    if not words:
        raise SystemExit(f"Loaded 0 usable words from {src}. Check the file.")
    return words


# compute the per-letter feedback for guess given the secret word
def letter_results(secret: Word, guess: Word, strict: bool = False) -> Results:
    """
    2 = correct, 1 = misplaced, 0 = non-member.

    By default a letter is misplaced whenever the secret contains it anywhere,
    so a repeated guess letter can be reported misplaced more times than the
    secret holds it. With strict=True each misplaced hit consumes one unmatched
    occurrence in the secret, which is how the real game reports repeats.
    """
    res = [LetterResult.NON_MEMBER] * N_LETTERS

    # first pass: correct slots
    for i, (s_ch, g_ch) in enumerate(zip(secret, guess)):
        if g_ch == s_ch:
            res[i] = LetterResult.CORRECT

    # second pass: misplaced (only for non-correct)
    if strict:
        remaining = Counter(s_ch for s_ch, r in zip(secret, res) if r != LetterResult.CORRECT)
        for i, g_ch in enumerate(guess):
            if res[i] == LetterResult.NON_MEMBER and remaining[g_ch] > 0:
                res[i] = LetterResult.MISPLACED
                remaining[g_ch] -= 1
    else:
        for i, g_ch in enumerate(guess):
            if res[i] == LetterResult.NON_MEMBER and g_ch in secret:
                res[i] = LetterResult.MISPLACED

    return tuple(res)


@dataclass(frozen=True)
class Win:
    attempts: int


@dataclass(frozen=True)
class Miss:
    results: Results


@dataclass(frozen=True)
class Loss:
    pass


GameResult = Union[Win, Miss, Loss]


class GameOverError(RuntimeError):
    """Raised when a guess is made in a game that was already won or lost."""


class Game:
    """A single game against a known secret, MAX_ATTEMPTS guesses long."""

    def __init__(self, secret: Word, strict: bool = False):
        self.secret = secret
        self.strict = strict
        self.attempts = 0
        self.over = False

    def copy(self) -> "Game":
        fork = Game(self.secret, strict=self.strict)
        fork.attempts = self.attempts
        fork.over = self.over
        return fork

    def attempt(self, guess: Word) -> GameResult:
        if self.over:
            raise GameOverError(f"Game is already over after {self.attempts} attempts")

        results = letter_results(self.secret, guess, strict=self.strict)
        self.attempts += 1

        if results == ALL_CORRECT:
            self.over = True
            return Win(self.attempts)
        if self.attempts == MAX_ATTEMPTS:
            self.over = True
            return Loss()
        return Miss(results)


# count how often each letter appears in each slot across the dictionary
def build_letter_histogram(dictionary: Iterable[Word]) -> LetterHistogram:
    counts = [[0] * len(ALPHABET) for _ in range(N_LETTERS)]
    for word in dictionary:
        if len(word) != N_LETTERS:
            raise ValueError(f"Wrong word length {len(word)} for {word!r}")
        for slot, letter in enumerate(word):
            # parse_word only lets A-Z through, so anything else is a corrupt word list
            if len(letter) != 1 or letter not in ALPHABET:
                raise ValueError(f"Wrong letter {letter!r} in {word!r}")
            counts[slot][letter_idx(letter)] += 1
    return tuple(tuple(row) for row in counts)


# score_word sums how common each letter is in its slot, divided by 1 + the number of repeated letters
def score_word(word: Word, histogram: LetterHistogram) -> int:
    seen: Set[str] = set()
    repeats = 1
    total = 0
    for slot, letter in enumerate(word):
        if letter in seen:
            repeats += 1
        total += histogram[slot][letter_idx(letter)]
        seen.add(letter)
    return total // repeats


class Constraints:
    """Everything the feedback so far says about the secret. Only ever grows."""

    def __init__(self):
        # words must have these letters somewhere
        self.must_have: Set[str] = set()
        # letters that can't be in the given slot
        self.excluded: List[Set[str]] = [set() for _ in range(N_LETTERS)]
        # letters known to be in the given slot
        self.confirmed: List[Optional[str]] = [None] * N_LETTERS

    def allows(self, word: Word) -> bool:
        for letter, excluded, confirmed in zip(word, self.excluded, self.confirmed):
            if confirmed is not None:
                if letter != confirmed:
                    return False
            elif letter in excluded:
                return False
        return all(letter in word for letter in self.must_have)

    def add(self, results: Sequence[LetterResult], word: Word) -> None:
        for i, (r, letter) in enumerate(zip(results, word)):
            if r == LetterResult.CORRECT:
                self.must_have.add(letter)
                self.confirmed[i] = letter
            elif r == LetterResult.MISPLACED:
                self.must_have.add(letter)
                self.excluded[i].add(letter)

        # non-members last, so a letter that is green or yellow elsewhere in
        # the same guess is only ruled out of its own slot
        for i, (r, letter) in enumerate(zip(results, word)):
            if r != LetterResult.NON_MEMBER:
                continue
            if letter in self.must_have:
                self.excluded[i].add(letter)
                continue
            for slot, confirmed in enumerate(self.confirmed):
                if confirmed is None:
                    self.excluded[slot].add(letter)


# solver class that filters the dictionary by accumulated feedback and ranks by letter frequency
class Solver:
    def __init__(self, dictionary: Sequence[Word], histogram: Optional[LetterHistogram] = None):
        self.constraints = Constraints()
        # built once from the full dictionary; pass one in to share it between sessions
        self.histogram = histogram if histogram is not None else build_letter_histogram(dictionary)

    def suggest(self, dictionary: Sequence[Word]) -> List[int]:
        """
        Indices of the words still consistent with the feedback, lowest score
        first. The best suggestion is the last one. Empty when nothing fits.
        """
        suggestions = [idx for idx, word in enumerate(dictionary) if self.constraints.allows(word)]
        suggestions.sort(key=lambda idx: score_word(dictionary[idx], self.histogram))
        return suggestions

    def candidates(self, dictionary: Sequence[Word]) -> List[Word]:
        return [dictionary[idx] for idx in self.suggest(dictionary)]

    def inform(self, results: Sequence[LetterResult], word: Word) -> None:
        self.constraints.add(results, word)


# parse_pattern converts a string like 'bygyb' or '02120' into per-letter results
def parse_pattern(s: str) -> Results:
    s = s.strip().lower()
    if re.fullmatch(r"[gyb]{5}", s):
        m = {"b": LetterResult.NON_MEMBER, "y": LetterResult.MISPLACED, "g": LetterResult.CORRECT}
        return tuple(m[ch] for ch in s)
    if re.fullmatch(r"[012]{5}", s):
        return tuple(LetterResult(int(ch)) for ch in s)
    raise ValueError("Pattern must be 5 chars of [g,y,b] or [0,1,2]. Example: 'bygyb' or '02120'.")


def format_pattern(results: Sequence[LetterResult]) -> str:
    return "".join("byg"[r] for r in results)


# results_from_letters maps the green and yellow letters typed by the player onto the slots of the guess
def results_from_letters(guess: Word, green: str, yellow: str) -> Results:
    green = green.upper()
    yellow = yellow.upper()
    res = [LetterResult.NON_MEMBER] * N_LETTERS
    for i, letter in enumerate(guess):
        if letter in green:
            res[i] = LetterResult.CORRECT
        elif letter in yellow:
            res[i] = LetterResult.MISPLACED
    return tuple(res)


# _read_line returns one stripped line of input, or None on quit or end of input
def _read_line(prompt: str) -> Optional[str]:
    try:
        text = input(prompt).strip()
    except EOFError:
        return None
    if text.lower() == "quit":
        return None
    return text


def _prompt_guess(dictionary: Sequence[Word], suggestions: List[int]) -> Optional[Word]:
    pending = list(suggestions)
    suggestion = dictionary[pending.pop()] if pending else None
    while True:
        if suggestion is not None:
            print(f"Suggestion: {format_word(suggestion)}")
        else:
            print("No suggestions, you're on your own!", file=sys.stderr)

        text = _read_line("Word (Enter to use the suggestion, @ for the next one): ")
        if text is None:
            return None
        if text == "@":
            suggestion = dictionary[pending.pop()] if pending else None
            continue
        if text == "" and suggestion is not None:
            return suggestion

        word = parse_word(text)
        if word is not None:
            return word
        print(f'"{text}" wasn\'t a valid word')


def _prompt_feedback(guess: Word, protocol: str) -> Optional[Results]:
    while True:
        if protocol == "pattern":
            pat_s = _read_line("Feedback pattern (g/y/b or 2/1/0): ")
            if pat_s is None:
                return None
            try:
                return parse_pattern(pat_s)
            except ValueError as e:
                print(f"{e}\n")
                continue

        green = _read_line("Green: ")
        if green is None:
            return None
        yellow = _read_line("Yellow: ")
        if yellow is None:
            return None
        return results_from_letters(guess, green, yellow)


def cli(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Wordle solver (interactive CLI).")
    ap.add_argument("words", nargs="?", default=None,
                    help=f"Word list (5-letter words, one per line). Default: {DEFAULT_WORD_LIST}")
    ap.add_argument("--protocol", choices=["letters", "pattern"], default="letters",
                    help="Type feedback as green/yellow letters or as a g/y/b pattern.")
    ap.add_argument("--top", type=int, default=5, help="How many suggestions to list each turn.")
    args = ap.parse_args(argv)

    dictionary = load_dictionary(args.words)
    solver = Solver(dictionary)

    print("\n=== Wordle Solver ===")
    print(f"Words: {len(dictionary)}")
    if args.protocol == "pattern":
        print("Feedback input: 5 letters [g,y,b] or digits [2,1,0]. Example: bygyb or 02120")
    else:
        print("Feedback input: the green letters, then the yellow letters of your guess (blank if none).")
    print("Type 'quit' to exit.\n")

    turn = 1
    while True:
        suggestions = solver.suggest(dictionary)
        print(f"Turn {turn} | Remaining candidates: {len(suggestions)}")
        if suggestions and args.top > 0:
            top = [dictionary[idx] for idx in reversed(suggestions[-args.top:])]
            print("Top suggestions (word | score):")
            for w in top:
                print(f"  {format_word(w)}  |  {score_word(w, solver.histogram)}")

        guess = _prompt_guess(dictionary, suggestions)
        if guess is None:
            break
        results = _prompt_feedback(guess, args.protocol)
        if results is None:
            break

        if results == ALL_CORRECT:
            print(f"Solved in {turn} turns.\n")
            break

        solver.inform(results, guess)
        print("")
        turn += 1

    return 0


if __name__ == "__main__":
    raise SystemExit(cli())
