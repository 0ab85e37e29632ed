import hashlib

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from shadigest.sha512 import SHA384, SHA512, sha384, sha512


def test_sha512_abc_known_vector():
    assert sha512("abc") == (
        "ddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a"
        "2192992a274fc1a836ba3c23a3feebbd454d4423643ce80e2a9ac94fa54ca49f"
    )


def test_sha384_abc_known_vector():
    assert sha384("abc") == (
        "cb00753f45a35e8bb5a03d699ac65007272c32ab0eded163"
        "1a8b605a43ff5bed8086072ba1e7cc2358baeca134c825a7"
    )


def test_empty_message_matches_reference():
    assert sha512("") == hashlib.sha512(b"").hexdigest()
    assert sha384("") == hashlib.sha384(b"").hexdigest()


@pytest.mark.parametrize("length", [1, 55, 111, 112, 113, 127, 128, 129, 239, 240, 256, 1000])
def test_block_boundaries_match_reference(length):
    data = bytes((i % 255) + 1 for i in range(length))
    assert sha512(data) == hashlib.sha512(data).hexdigest()
    assert sha384(data) == hashlib.sha384(data).hexdigest()


def test_digest_lengths_and_case():
    d512 = sha512("hello world")
    d384 = sha384("hello world")
    assert len(d512) == SHA512.digest_size * 2 == 128
    assert len(d384) == SHA384.digest_size * 2 == 96
    assert d512 == d512.lower()
    assert d384 == d384.lower()


def test_classes_agree_with_functions():
    assert SHA512().hash("message") == sha512("message")
    assert SHA384().hash("message") == sha384("message")


def test_text_is_hashed_as_utf8():
    text = "grüße ✓"
    assert sha512(text) == sha512(text.encode("utf-8"))
    assert sha384(text) == hashlib.sha384(text.encode("utf-8")).hexdigest()


def test_message_ends_at_first_nul():
    assert sha512(b"ab\x00cd") == sha512(b"ab")
    assert sha384("ab\x00cd") == sha384("ab")


def test_bytes_like_inputs_agree():
    data = b"some bytes"
    assert sha512(bytearray(data)) == sha512(data)
    assert sha384(memoryview(data)) == sha384(data)


def test_sha384_differs_from_truncated_sha512():
    assert sha384("abc") != sha512("abc")[:96]


@pytest.mark.parametrize("bad", [42, None, 3.5, ["abc"]])
def test_rejects_non_bytes(bad):
    with pytest.raises(TypeError):
        sha512(bad)
    with pytest.raises(TypeError):
        sha384(bad)


@settings(max_examples=50, deadline=None)
@given(st.binary(max_size=400).filter(lambda b: b"\x00" not in b))
def test_matches_reference_for_random_data(data):
    assert sha512(data) == hashlib.sha512(data).hexdigest()
    assert sha384(data) == hashlib.sha384(data).hexdigest()