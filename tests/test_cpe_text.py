from collections import Counter
from itertools import pairwise

from algokit.cpe_text import (
    common_permutation,
    decode_mad_man,
    letter_frequencies,
    rotate_sentences,
    tex_quotes,
)


def test_common_permutation_pinned():
    assert common_permutation("pretty", "women") == "e"


def test_common_permutation_is_sorted_submultiset():
    a, b = "walking", "kangaroo"
    result = common_permutation(a, b)
    assert list(result) == sorted(result)
    counts = Counter(result)
    assert all(counts[c] <= Counter(a)[c] and counts[c] <= Counter(b)[c] for c in counts)
    assert result == common_permutation(b, a)


def test_common_permutation_with_itself():
    word = "mississippi"
    assert common_permutation(word, word) == "".join(sorted(word))


def test_decode_mad_man_example():
    assert decode_mad_man("k[r dyt I[o") == "how are you"


def test_decode_mad_man_case_insensitive():
    assert decode_mad_man("K[R") == decode_mad_man("k[r")


def test_decode_mad_man_drops_leftmost_keys():
    assert decode_mad_man("q") == ""


def test_rotate_sentences_pinned():
    assert rotate_sentences(["ab", "c"]) == ["ca", " b"]


def test_rotate_sentences_shape():
    lines = ["Rene Decartes once said,", "I think, therefore I am."]
    rotated = rotate_sentences(lines)
    assert len(rotated) == max(len(line) for line in lines)
    assert all(len(row) == len(lines) for row in rotated)
    assert "".join(row[-1] for row in rotated) == lines[0]


def test_rotate_sentences_empty():
    assert rotate_sentences([]) == []


def test_tex_quotes_pair():
    assert tex_quotes('"hi"') == "``hi''"


def test_tex_quotes_leaves_plain_text():
    text = "no quotes here"
    assert tex_quotes(text) == text


def test_tex_quotes_alternates():
    result = tex_quotes('"a" "b" "c"')
    assert result.count("``") == 3
    assert result.count("''") == 3
    assert '"' not in result


def test_letter_frequencies_case_insensitive():
    assert letter_frequencies(["aAb"]) == letter_frequencies(["AAB"])


def test_letter_frequencies_order_and_totals():
    lines = ["This is a test.", "Count me 1 2 3 4 5.", "!!!! USA !!!!!"]
    result = letter_frequencies(lines)
    assert sum(count for _, count in result) == sum(
        c.isalpha() for line in lines for c in line
    )
    for (letter_a, count_a), (letter_b, count_b) in pairwise(result):
        assert count_a > count_b or (count_a == count_b and letter_a < letter_b)
    assert all(letter.isupper() for letter, _ in result)