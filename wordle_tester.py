#!/usr/bin/env python3
"""wordle_tester.py

Lets the solver in wordle.py play against itself for every word in a word list
and prints summary statistics (win rate, attempts-to-win histogram, how often
the candidate pool ran dry). Optionally writes a matplotlib graph to disk.

Examples:
  python3 wordle_tester.py words.txt --limit 200 --seed 7
  python3 wordle_tester.py words.txt --strict --plot results.png

Notes:
- The word list is shuffled before play; pass --seed for a repeatable order.
- Use --plot to require matplotlib (pip install ".[plot]").
"""

from __future__ import annotations

import argparse
import random
import statistics
import sys
import time
from collections import Counter
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

import tqdm

import wordle
from wordle import Word

WIN = "win"
LOSS = "loss"
EXHAUSTED = "exhausted"

LogFn = Callable[[str], None]


@dataclass(frozen=True)
class SelfPlayResult:
    secret: Word
    outcome: str  # WIN, LOSS or EXHAUSTED
    attempts: int
    guesses: Tuple[Word, ...]
    final_candidates: int

    @property
    def solved(self) -> bool:
        return self.outcome == WIN

    @property
    def first_guess(self) -> Optional[Word]:
        return self.guesses[0] if self.guesses else None


# shuffle_words returns a shuffled copy; the same seed always gives the same order
def shuffle_words(words: Sequence[Word], seed: Optional[int] = None) -> List[Word]:
    out = list(words)
    random.Random(seed).shuffle(out)
    return out


def _iter_progress(iterable, *, enabled: bool, desc: str, unit: str):
    if enabled:
        return tqdm.tqdm(iterable, desc=desc, unit=unit)
    return iterable


def play_against_self(
    dictionary: Sequence[Word],
    secret: Word,
    *,
    histogram: Optional[wordle.LetterHistogram] = None,
    first_guess: Optional[Word] = None,
    strict: bool = False,
    log: Optional[LogFn] = None,
) -> SelfPlayResult:
    game = wordle.Game(secret, strict=strict)
    solver = wordle.Solver(dictionary, histogram=histogram)
    guesses: List[Word] = []

    while True:
        suggestions = solver.suggest(dictionary)
        if first_guess is not None and not guesses:
            guess = first_guess
        elif suggestions:
            guess = dictionary[suggestions[-1]]
        else:
            if log is not None:
                log(f"{wordle.format_word(secret)}: no candidates left after {game.attempts} attempts")
            return SelfPlayResult(
                secret=secret,
                outcome=EXHAUSTED,
                attempts=game.attempts,
                guesses=tuple(guesses),
                final_candidates=0,
            )

        guesses.append(guess)
        result = game.attempt(guess)
        if log is not None:
            verdict = wordle.format_pattern(result.results) if isinstance(result, wordle.Miss) else type(result).__name__
            log(
                f"{wordle.format_word(secret)}: attempt {game.attempts} "
                f"'{wordle.format_word(guess)}' of {len(suggestions)} candidates -> {verdict}"
            )

        if isinstance(result, wordle.Miss):
            solver.inform(result.results, guess)
            continue

        return SelfPlayResult(
            secret=secret,
            outcome=WIN if isinstance(result, wordle.Win) else LOSS,
            attempts=game.attempts,
            guesses=tuple(guesses),
            final_candidates=len(suggestions),
        )


def run_batch(
    dictionary: Sequence[Word],
    secrets: Iterable[Word],
    *,
    first_guess: Optional[Word] = None,
    strict: bool = False,
    progress: bool = False,
    log: Optional[LogFn] = None,
) -> List[SelfPlayResult]:
    # the histogram only depends on the dictionary, so every session shares it
    histogram = wordle.build_letter_histogram(dictionary)
    results: List[SelfPlayResult] = []
    for secret in _iter_progress(secrets, enabled=progress, desc="Simulating", unit="game"):
        results.append(
            play_against_self(
                dictionary,
                secret,
                histogram=histogram,
                first_guess=first_guess,
                strict=strict,
                log=log,
            )
        )
    return results


# attempt_histogram counts wins by the attempt they happened on, index 0 = first attempt
def attempt_histogram(results: Iterable[SelfPlayResult]) -> List[int]:
    hist = [0] * wordle.MAX_ATTEMPTS
    for r in results:
        if r.solved:
            hist[r.attempts - 1] += 1
    return hist


def summarize(results: Iterable[SelfPlayResult]) -> str:
    results = list(results)
    if not results:
        return "No results."

    wins = [r for r in results if r.outcome == WIN]
    losses = [r for r in results if r.outcome == LOSS]
    exhausted = [r for r in results if r.outcome == EXHAUSTED]
    first_guess_counts = Counter(r.first_guess for r in results if r.first_guess)

    total = len(results)
    lines: List[str] = []
    lines.append(f"Games: {total}")
    lines.append(f"Wins: {len(wins)} ({len(wins) / total * 100:.2f}%)")
    lines.append(f"Losses: {len(losses)} ({len(losses) / total * 100:.2f}%)")
    lines.append(f"Exhausted: {len(exhausted)} ({len(exhausted) / total * 100:.2f}%)")

    decided = len(wins) + len(losses)
    if decided:
        lines.append(f"Win rate (wins / (wins + losses)): {len(wins) / decided:.4f}")

    if wins:
        attempts_list = [r.attempts for r in wins]
        lines.append(f"Avg attempts (wins): {statistics.mean(attempts_list):.3f}")
        lines.append(f"Median attempts (wins): {statistics.median(attempts_list):.1f}")
        hist = attempt_histogram(wins)
        lines.append("Attempt distribution (wins): " + ", ".join(f"{i + 1}:{n}" for i, n in enumerate(hist)))

    if first_guess_counts:
        (top_guess, top_count) = first_guess_counts.most_common(1)[0]
        lines.append(f"Most common first guess: {wordle.format_word(top_guess)} ({top_count} / {total})")

    failed = losses + exhausted
    if failed:
        examples = ", ".join(wordle.format_word(r.secret) for r in failed[:10])
        lines.append(f"Failed examples (up to 10): {examples}")

    return "\n".join(lines)


def plot_results(*, results: List[SelfPlayResult], out_path: str) -> None:
    # Import matplotlib only if plotting is requested.
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt  # noqa: E402

    total = len(results)
    wins = [r for r in results if r.solved]
    n_losses = sum(1 for r in results if r.outcome == LOSS)
    n_exhausted = sum(1 for r in results if r.outcome == EXHAUSTED)

    xs = list(range(1, wordle.MAX_ATTEMPTS + 1))
    ys = attempt_histogram(wins)

    loss_x = wordle.MAX_ATTEMPTS + 1
    exhausted_x = wordle.MAX_ATTEMPTS + 2

    fig, ax = plt.subplots(figsize=(10, 4.5))
    ax.bar(xs, ys, label="Won", color="C0")
    ax.bar([loss_x], [n_losses], label="Lost", color="C3")
    ax.bar([exhausted_x], [n_exhausted], label="Exhausted", color="C1")

    ax.set_title("Wordle self-play results")
    ax.set_xlabel("Attempts to win")
    ax.set_ylabel("# games")
    ax.set_xticks(xs + [loss_x, exhausted_x])
    ax.set_xticklabels([str(t) for t in xs] + ["loss", "exh."])

    won_pct = (len(wins) / total * 100.0) if total else 0.0
    ax.text(
        0.99,
        0.95,
        f"Won: {len(wins)}/{total} ({won_pct:.1f}%)",
        transform=ax.transAxes,
        ha="right",
        va="top",
    )

    ax.legend(loc="upper left")
    fig.tight_layout()
    fig.savefig(out_path, dpi=150)
    plt.close(fig)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Let the Wordle solver play against itself and print statistics.")
    ap.add_argument("words", nargs="?", default=None,
                    help=f"Word list (5-letter words, one per line). Default: {wordle.DEFAULT_WORD_LIST}")
    ap.add_argument("--secrets", type=str, default=None,
                    help="Secrets to play (defaults to the whole shuffled word list).")
    ap.add_argument("--limit", type=int, default=0, help="Limit number of secrets (0 = no limit).")
    ap.add_argument("--seed", type=int, default=None, help="Seed for shuffling the word list.")
    ap.add_argument("--no-shuffle", action="store_true", help="Keep the word list in file order.")
    ap.add_argument("--first-guess", type=str, default=None, help="Force a specific first guess.")
    ap.add_argument("--strict", action="store_true",
                    help="Report repeated letters the way the real game does (one yellow per occurrence).")
    ap.add_argument("--no-progress", action="store_true", help="Disable progress bars.")
    ap.add_argument("--plot", type=str, default=None, help="Write a matplotlib graph to this path (e.g. results.png).")
    ap.add_argument("--verbose", action="store_true", help="Print every guess to the console.")
    ap.add_argument("--debug", action="store_true", help="Very verbose logs (skipped secrets, attempt histogram).")
    args = ap.parse_args(argv)

    verbose = bool(args.verbose or args.debug)
    debug = bool(args.debug)

    start_t = time.time()

    def log(msg: str) -> None:
        if not verbose:
            return
        dt = time.time() - start_t
        print(f"[{dt:7.2f}s] {msg}")

    def log_debug(msg: str) -> None:
        if not debug:
            return
        dt = time.time() - start_t
        print(f"[{dt:7.2f}s] DEBUG {msg}")

    dictionary = wordle.load_dictionary(args.words)
    if not args.no_shuffle:
        dictionary = shuffle_words(dictionary, seed=args.seed)
    log(f"solver: loaded {len(dictionary)} words shuffle={not args.no_shuffle} seed={args.seed}")

    first_guess: Optional[Word] = None
    if args.first_guess is not None:
        first_guess = wordle.parse_word(args.first_guess)
        if first_guess is None:
            print(f"Forced first guess '{args.first_guess}' is not a 5-letter word.", file=sys.stderr)
            return 2
        log(f"solver: forced first guess = {wordle.format_word(first_guess)}")

    if args.secrets:
        try:
            secrets = wordle.load_words_from_file(args.secrets)
        except FileNotFoundError:
            print(f"Secrets list not found: {args.secrets}", file=sys.stderr)
            return 2
    else:
        secrets = list(dictionary)

    if args.limit and args.limit > 0:
        secrets = secrets[: args.limit]

    known = set(dictionary)
    skipped = [w for w in secrets if w not in known]
    if skipped:
        print(f"Skipped {len(skipped)} secrets not in the word list.")
        log_debug("skipped: " + " ".join(wordle.format_word(w) for w in skipped[:20]))
        secrets = [w for w in secrets if w in known]

    results = run_batch(
        dictionary,
        secrets,
        first_guess=first_guess,
        strict=args.strict,
        progress=not args.no_progress,
        log=log if verbose else None,
    )
    log_debug(f"attempt histogram: {attempt_histogram(results)}")

    print(summarize(results))

    if args.plot:
        try:
            plot_results(results=results, out_path=args.plot)
            print(f"Wrote plot: {args.plot}")
        except ModuleNotFoundError as e:
            print(f"Plot requested but missing dependency: {e}. Install matplotlib to use --plot.", file=sys.stderr)
            return 2

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
