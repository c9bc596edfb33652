from checksim.core.rng import keccak256, keccak_uint, make_rng, random, random_salted

KECCAK_UINT_0 = 0x290DECD9548B62A8D60345A988386FC84BA6BC95484008F6362F93160EF3E563
KECCAK_UINT_1 = 0xB10E2D527612073B26EECDFD717E6A320CF44B4AFAC2B0732D9FCBE2B7FA0CF6
SEEDS = [0, 1, 42, 100, 200, 12345, 2**255 + 17, 2**256 - 1]


def test_keccak_is_ethereum_keccak_not_sha3():
    assert keccak256(b"").hex() == "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"


def test_packed_uint256_words():
    assert keccak_uint(0) == KECCAK_UINT_0
    assert keccak_uint(1) == KECCAK_UINT_1
    assert random(0, 2**256) == KECCAK_UINT_0
    assert random(1, 1000) == KECCAK_UINT_1 % 1000


def test_random_is_deterministic_and_in_range():
    for seed in SEEDS:
        for modulus in (1, 2, 80, 120, 2**64):
            value = random(seed, modulus)
            assert value == random(seed, modulus)
            assert 0 <= value < modulus


def test_salted_in_range():
    for seed in SEEDS:
        assert 0 <= random_salted(seed, "band", 120) < 120
        assert 0 <= random_salted(seed, "gradient", 100) < 100


def test_salting_changes_the_draw():
    differs = [random_salted(s, "band", 120) != random(s, 120) for s in SEEDS]
    assert sum(differs) >= len(SEEDS) - 1
    assert random_salted(42, "band", 2**256) != random_salted(42, "gradient", 2**256)


def test_two_word_randomizer_depends_on_order():
    assert keccak_uint(100, 200) != keccak_uint(200, 100)


def test_make_rng_is_seeded():
    assert make_rng(3).integers(1_000_000) == make_rng(3).integers(1_000_000)
