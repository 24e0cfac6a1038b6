from typing import List

import pytest

import wordle
from helpers import w

WORDS = [
    "panic", "manic", "fovea", "grads", "quack", "tacit", "binks", "stern",
    "bares", "crane", "slate", "abide", "speed", "eerie", "tonic", "sonic",
    "mania", "pains", "plain", "chain", "carts", "scare", "adieu", "robot",
]


@pytest.fixture
def dictionary() -> List[wordle.Word]:
    return [w(t) for t in WORDS]


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return path
