from __future__ import annotations

import pytest

from textops_cli import transforms


@pytest.mark.parametrize(
    "text,words",
    [
        ("hello world", ["hello", "world"]),
        ("helloWorld", ["hello", "World"]),
        ("HTTPServer", ["HTTP", "Server"]),
        ("XMLHttpRequest v2", ["XML", "Http", "Request", "v", "2"]),
        ("version2Alpha", ["version", "2", "Alpha"]),
        ("abc123def", ["abc", "123", "def"]),
        ("  --hello__world-- ", ["hello", "world"]),
        ("Hello, World!", ["Hello", "World"]),
        ("ALLCAPS", ["ALLCAPS"]),
        ("", []),
        ("   \t ", []),
        ("!!!", []),
    ],
)
def test_split_words_boundaries(text, words):
    assert transforms.split_words(text) == words


def test_split_words_keeps_decomposed_accents_in_one_word():
    assert transforms.split_words("cafe\u0301 noir") == ["caf\u00e9", "noir"]


def test_snake_case_examples():
    assert transforms.snake_case("hello world") == "hello_world"
    assert transforms.snake_case("HTTPServer error") == "http_server_error"
    assert transforms.snake_case("  --hello__world-- ") == "hello_world"
    assert transforms.snake_case("getUserID2") == "get_user_id_2"


def test_camel_case_examples():
    assert transforms.camel_case("hello world") == "helloWorld"
    assert transforms.camel_case("XMLHttpRequest") == "xmlHttpRequest"
    assert transforms.camel_case("snake_case_value") == "snakeCaseValue"
    assert transforms.camel_case("HELLO WORLD") == "helloWorld"
    assert transforms.camel_case("   ") == ""


def test_no_spaces_removes_all_whitespace():
    assert transforms.no_spaces("hello world") == "helloworld"
    assert transforms.no_spaces(" a\tb\nc  d ") == "abcd"
    assert transforms.no_spaces("a-b_c") == "a-b_c"


def test_case_changes_leave_non_letters_alone():
    assert transforms.upper_case("abc 123 !?") == "ABC 123 !?"
    assert transforms.lower_case("ÀBC 123 !?") == "àbc 123 !?"


@pytest.mark.parametrize(
    "text,slug",
    [
        ("Hello, World!", "hello-world"),
        ("Crème Brûlée à la carte", "creme-brulee-a-la-carte"),
        ("  --Leading and trailing--  ", "leading-and-trailing"),
        ("Straße Ærø", "strasse-aero"),
        ("a   b___c", "a-b-c"),
        ("100% Pure", "100-pure"),
        ("日本語", ""),
        ("", ""),
    ],
)
def test_slugify(text, slug):
    assert transforms.slugify(text) == slug


def test_split_words_keeps_combining_marks_with_their_letter():
    assert transforms.split_words("a\u0331b c") == ["a\u0331b", "c"]
    assert transforms.split_words("X\u0331ml") == ["X\u0331ml"]
    assert transforms.split_words("\u0331lead") == ["\u0331lead"]
    assert transforms.snake_case("a\u0331b c") == "a\u0331b_c"


def test_devanagari_words_are_not_split_on_vowel_signs():
    text = "नमस्ते दुनिया"
    assert transforms.split_words(text) == ["नमस्ते", "दुनिया"]
    assert transforms.snake_case(text) == "नमस्ते_दुनिया"
    assert transforms.camel_case(text) == "नमस्तेदुनिया"
