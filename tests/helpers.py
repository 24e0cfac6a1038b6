import wordle


def w(text: str) -> wordle.Word:
    word = wordle.parse_word(text)
    assert word is not None, text
    return word
