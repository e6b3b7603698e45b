from script.clean_wordlist import clean_words, strip_marks


def test_strip_marks():
    assert strip_marks("بِسْمِ") == "بسم"
    assert strip_marks("جـــمل") == "جمل"


def test_clean_words_filters_and_dedupes():
    lines = ["  جَمَل ", "جمل", "مدرسة", "cat", "", "باب", "كتاب كتاب"]
    assert clean_words(lines) == ["جمل", "باب"]
