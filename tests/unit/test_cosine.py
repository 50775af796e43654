import math

import pytest

from text_similarity import CosineTextSimilarity, Token, word_tokenize
from text_similarity.core.cosine import norm_product, term_vectors
from text_similarity.core.frequency import frequency

TEXT1 = "我爱购物"
TEXT2 = "我爱读书"
TEXT3 = "他是黑客"


def _toks(*words):
    return [Token(w) for w in words]


def test_cosine_self_identity():
    c = CosineTextSimilarity()
    for t in (TEXT1, TEXT2, TEXT3, "aab", "x"):
        assert c.similar_score(t, t) == pytest.approx(1.0, abs=1e-9)


def test_cosine_chinese_examples():
    c = CosineTextSimilarity()
    assert c.similar_score(TEXT1, TEXT1) == pytest.approx(1.0, abs=1e-9)
    assert c.similar_score(TEXT1, TEXT2) == pytest.approx(0.5, abs=1e-9)
    assert c.similar_score(TEXT1, TEXT3) == 0.0


def test_cosine_symmetric_exactly():
    c = CosineTextSimilarity(tokenizer=word_tokenize)
    pairs = [
        ("the cat sat on the mat", "the dog sat on the log"),
        ("a a a b", "a b b c"),
        ("one", "one two two three"),
    ]
    for a, b in pairs:
        assert c.similar_score(a, b) == c.similar_score(b, a)


def test_cosine_uses_frequencies():
    c = CosineTextSimilarity()
    # a=(2,1) b=(1,0): 2 / (sqrt(5) * 1)
    got = c.score_tokens(_toks("a", "a", "b"), _toks("a"))
    assert got == pytest.approx(2.0 / math.sqrt(5.0), abs=1e-12)


def test_cosine_bounds():
    c = CosineTextSimilarity(tokenizer=word_tokenize)
    for a, b in [("x y z", "y z w"), ("x x x y", "y"), ("p q", "q q q q")]:
        s = c.similar_score(a, b)
        assert 0.0 <= s <= 1.0


def test_cosine_disjoint_is_zero():
    c = CosineTextSimilarity(tokenizer=word_tokenize)
    assert c.similar_score("alpha beta", "gamma delta") == 0.0


def test_cosine_empty_side_is_nan():
    c = CosineTextSimilarity()
    assert math.isnan(c.similar_score("", TEXT1))
    assert math.isnan(c.similar_score(TEXT1, ""))
    assert math.isnan(c.similar_score("", ""))
    assert math.isnan(c.score_tokens([], []))


def test_term_vectors_aligned_over_union():
    a = _toks("a", "a", "b")
    b = _toks("b", "c")
    dims = _toks("a", "b", "c")
    va, vb = term_vectors(frequency(a), frequency(b), dims)
    assert va.tolist() == [2, 1, 0]
    assert vb.tolist() == [0, 1, 1]


def test_norm_product():
    assert norm_product(2.0, 3.0) == 6.0
    assert norm_product(0.0, 3.0) == 0.0
