from nlptour.nlp.tokenization import tokenize


def test_splits_brackets_and_final_period(blank_en):
    tokens = tokenize(blank_en, "around 9500 years ago (7500 BC).")
    assert tokens == ["around", "9500", "years", "ago", "(", "7500", "BC", ")", "."]


def test_keeps_digit_grouping_comma(blank_en):
    tokens = tokenize(blank_en, "around 9,500 years ago (7,500 BC).")
    assert "9,500" in tokens
    assert "7,500" in tokens


def test_space_separated_thousands_are_two_tokens(blank_en):
    tokens = tokenize(blank_en, "around 9 500 years")
    assert tokens == ["around", "9", "500", "years"]


def test_whitespace_tokens_are_dropped(blank_en):
    assert tokenize(blank_en, "cats  like   milk") == ["cats", "like", "milk"]


def test_german_pipeline(blank_de):
    assert tokenize(blank_de, "Salonlöwen trinken Milch.") == ["Salonlöwen", "trinken", "Milch", "."]
