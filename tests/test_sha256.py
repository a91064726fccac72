import hashlib

import pytest

from melice.sha256 import BLOCK_SIZE, Sha256, hash_data, hashes_equal


@pytest.mark.parametrize("length", [0, 1, 3, 55, 56, 57, 63, 64, 65, 119, 120, 128, 1000])
def test_hash_matches_reference(length):
    data = bytes((index * 7 + 3) % 256 for index in range(length))
    assert hash_data(data) == hashlib.sha256(data).digest()


def test_bonjour_le_monde():
    data = b"Bonjour le monde"
    assert hash_data(data).hex() == hashlib.sha256(data).hexdigest()


def test_digest_length():
    assert len(hash_data(b"abc")) == BLOCK_SIZE


def test_incremental_updates_match_one_shot():
    data = bytes(range(256)) * 3
    hasher = Sha256()
    for start in range(0, len(data), 17):
        hasher.update(data[start:start + 17])
    assert hasher.final() == hash_data(data)


def test_final_does_not_consume_state():
    hasher = Sha256(b"first")
    first = hasher.final()
    assert hasher.final() == first
    hasher.update(b" second")
    assert hasher.final() == hashlib.sha256(b"first second").digest()


def test_hashes_equal():
    digest = hash_data(b"one")
    assert hashes_equal(digest, hash_data(b"one")) is True
    assert hashes_equal(digest, hash_data(b"two")) is False


def test_hashes_equal_rejects_short_input():
    with pytest.raises(ValueError):
        hashes_equal(b"short", hash_data(b"x"))