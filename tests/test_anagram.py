import pytest

from bmovie.anagram import group_anagrams, is_valid_anagram, main


@pytest.mark.parametrize(
    "s, t, expected",
    [
        ("anagram", "nagaram", True),
        ("red", "green", False),
        ("ab", "ac", False),
    ],
)
def test_is_valid_anagram(s, t, expected):
    assert is_valid_anagram(s, t) is expected


def test_invalid_character_raises():
    with pytest.raises(ValueError):
        is_valid_anagram("Ab", "ab")


def test_length_checked_before_characters():
    assert is_valid_anagram("A", "ab") is False


def test_group_anagrams_sample():
    words = ["kita", "atik", "tika", "aku", "kia", "makan", "kua"]
    assert group_anagrams(words) == [
        ["kita", "atik", "tika"],
        ["aku", "kua"],
        ["kia"],
        ["makan"],
    ]


def test_group_anagrams_keeps_every_word():
    words = ["abc", "cab", "xyz", "bca", "zyx", "q"]
    groups = group_anagrams(words)
    assert sorted(w for g in groups for w in g) == sorted(words)
    for group in groups:
        assert all(is_valid_anagram(group[0], w) for w in group)


def test_group_anagrams_empty():
    assert group_anagrams([]) == []


def test_main_default(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "[[kita atik tika] [aku kua] [kia] [makan]]\n"


def test_main_arguments(capsys):
    main(["ab", "ba", "c"])
    assert capsys.readouterr().out == "[[ab ba] [c]]\n"