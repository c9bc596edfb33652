from checksim.core.arith import avg, max, min, min_gt0


def test_avg_rounds_down():
    assert avg(3, 4) == 3
    assert avg(4, 4) == 4
    assert avg(5, 6) == 5
    assert avg(0, 1) == 0
    assert avg(255, 255) == 255
    assert avg(3, 3) == 3


def test_min_max():
    assert min(3, 7) == 3
    assert max(3, 7) == 7


def test_min_gt0_zero_operands():
    assert min_gt0(0, 3) == 3
    assert min_gt0(3, 0) == 3
    assert min_gt0(0, 0) == 0


def test_min_gt0_matches_min_for_nonzero():
    for a in range(1, 7):
        for b in range(1, 7):
            assert min_gt0(a, b) == min(a, b)
