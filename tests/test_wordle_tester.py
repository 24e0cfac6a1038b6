import pytest

import wordle
import wordle_tester
from wordle_tester import EXHAUSTED, LOSS, WIN, SelfPlayResult

from helpers import w


def test_shuffle_words_is_seeded_and_pure(dictionary):
    original = list(dictionary)
    a = wordle_tester.shuffle_words(dictionary, seed=42)
    b = wordle_tester.shuffle_words(dictionary, seed=42)
    assert a == b
    assert sorted(a) == sorted(dictionary)
    assert dictionary == original


def test_play_against_self_wins():
    dictionary = [w("panic"), w("manic")]
    result = wordle_tester.play_against_self(dictionary, w("panic"))
    assert result.outcome == WIN
    assert result.solved
    assert result.attempts == 2
    assert result.guesses == (w("manic"), w("panic"))
    assert result.first_guess == w("manic")


def test_play_against_self_exhausted_is_not_a_loss():
    dictionary = [w("panic"), w("manic")]
    result = wordle_tester.play_against_self(dictionary, w("binks"))
    assert result.outcome == EXHAUSTED
    assert not result.solved
    assert result.attempts == 1
    assert result.final_candidates == 0


def test_play_against_self_loses_after_max_attempts():
    # every word only differs in the first slot, so each guess rules out one word
    dictionary = [w(t) for t in ["ganic", "banic", "canic", "danic", "eanic", "fanic", "hanic"]]
    result = wordle_tester.play_against_self(dictionary, w("canic"))
    assert result.outcome == LOSS
    assert result.attempts == wordle.MAX_ATTEMPTS
    assert w("canic") not in result.guesses


def test_play_against_self_forced_first_guess():
    dictionary = [w("panic"), w("manic")]
    result = wordle_tester.play_against_self(dictionary, w("panic"), first_guess=w("fovea"))
    assert result.guesses == (w("fovea"), w("manic"), w("panic"))
    assert result.outcome == WIN
    assert result.attempts == 3


def test_play_against_self_logs_each_attempt():
    messages = []
    dictionary = [w("panic"), w("manic")]
    wordle_tester.play_against_self(dictionary, w("panic"), log=messages.append)
    assert len(messages) == 2
    assert "attempt 1 'MANIC'" in messages[0]
    assert messages[0].endswith("bgggg")
    assert messages[1].endswith("Win")


@pytest.mark.parametrize("strict", [False, True])
def test_run_batch_terminates_for_every_word(dictionary, strict):
    results = wordle_tester.run_batch(dictionary, dictionary, strict=strict)
    assert len(results) == len(dictionary)
    for r in results:
        assert r.outcome in (WIN, LOSS)
        assert 1 <= r.attempts <= wordle.MAX_ATTEMPTS
        if r.solved:
            assert r.guesses[-1] == r.secret


def _result(secret, outcome, attempts):
    guesses = (w("slate"),) * attempts
    return SelfPlayResult(secret=w(secret), outcome=outcome, attempts=attempts, guesses=guesses, final_candidates=1)


def test_attempt_histogram_counts_only_wins():
    results = [
        _result("panic", WIN, 2),
        _result("manic", WIN, 2),
        _result("tonic", WIN, 5),
        _result("sonic", LOSS, 6),
        _result("binks", EXHAUSTED, 3),
    ]
    assert wordle_tester.attempt_histogram(results) == [0, 2, 0, 0, 1, 0]


def test_summarize():
    results = [
        _result("panic", WIN, 2),
        _result("manic", WIN, 4),
        _result("sonic", LOSS, 6),
        _result("binks", EXHAUSTED, 3),
    ]
    text = wordle_tester.summarize(results)
    assert "Games: 4" in text
    assert "Wins: 2 (50.00%)" in text
    assert "Losses: 1 (25.00%)" in text
    assert "Exhausted: 1 (25.00%)" in text
    assert "Win rate (wins / (wins + losses)): 0.6667" in text
    assert "Avg attempts (wins): 3.000" in text
    assert "Attempt distribution (wins): 1:0, 2:1, 3:0, 4:1, 5:0, 6:0" in text
    assert "Most common first guess: SLATE (4 / 4)" in text
    assert "Failed examples (up to 10): SONIC, BINKS" in text


def test_summarize_empty():
    assert wordle_tester.summarize([]) == "No results."


def test_main_runs_every_word(word_file, capsys):
    assert wordle_tester.main([str(word_file), "--no-progress", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "Games: 24" in out
    assert "Exhausted: 0 (0.00%)" in out


def test_main_limit_and_verbose(word_file, capsys):
    assert wordle_tester.main([str(word_file), "--no-progress", "--no-shuffle", "--limit", "2", "--verbose"]) == 0
    out = capsys.readouterr().out
    assert "Games: 2" in out
    assert "PANIC: attempt 1" in out
    assert "solver: loaded 24 words" in out


def test_main_rejects_bad_first_guess(word_file, capsys):
    assert wordle_tester.main([str(word_file), "--no-progress", "--first-guess", "abc"]) == 2
    assert "not a 5-letter word" in capsys.readouterr().err


def test_main_skips_unknown_secrets(word_file, tmp_path, capsys):
    secrets = tmp_path / "secrets.txt"
    secrets.write_text("panic\nzzzzz\n", encoding="utf-8")
    assert wordle_tester.main([str(word_file), "--no-progress", "--secrets", str(secrets)]) == 0
    out = capsys.readouterr().out
    assert "Skipped 1 secrets not in the word list." in out
    assert "Games: 1" in out


def test_main_missing_word_list(tmp_path):
    with pytest.raises(SystemExit):
        wordle_tester.main([str(tmp_path / "missing.txt"), "--no-progress"])


def test_plot_results(tmp_path):
    pytest.importorskip("matplotlib")
    out = tmp_path / "results.png"
    results = [_result("panic", WIN, 2), _result("sonic", LOSS, 6), _result("binks", EXHAUSTED, 3)]
    wordle_tester.plot_results(results=results, out_path=str(out))
    assert out.exists()


def test_main_missing_secrets_file(word_file, tmp_path, capsys):
    missing = tmp_path / "missing.txt"
    assert wordle_tester.main([str(word_file), "--no-progress", "--secrets", str(missing)]) == 2
    assert "Secrets list not found" in capsys.readouterr().err


def test_main_plot_without_matplotlib(word_file, tmp_path, monkeypatch, capsys):
    def no_matplotlib(*, results, out_path):
        raise ModuleNotFoundError("No module named 'matplotlib'")

    monkeypatch.setattr(wordle_tester, "plot_results", no_matplotlib)
    out = tmp_path / "results.png"
    assert wordle_tester.main([str(word_file), "--no-progress", "--limit", "1", "--plot", str(out)]) == 2
    assert "Install matplotlib" in capsys.readouterr().err
    assert not out.exists()
