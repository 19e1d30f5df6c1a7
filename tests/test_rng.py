import pytest

from mazescore.rng import MTRandom, N, mt_seed, temper

def test_reference_outputs_default_seed():
    rng = MTRandom(5489)
    got = [rng.next32() for _ in range(5)]
    assert got == [3499211612, 581869302, 3890346734, 3586334585, 545404204]

def test_ten_thousandth_output_default_seed():
    rng = MTRandom(5489)
    for _ in range(9999):
        rng.next32()
    assert rng.next32() == 4123659995

def test_reference_outputs_seed_one():
    rng = MTRandom(1)
    assert [rng.next32() for _ in range(3)] == [1791095845, 4282876139, 3093770124]

def test_seed_table_shape_and_first_word():
    mt = mt_seed(121321)
    assert len(mt) == N
    assert mt[0] == 121321
    assert all(0 <= w <= 0xFFFFFFFF for w in mt)

def test_temper_zero_is_zero():
    assert temper(0) == 0

def test_same_seed_same_stream_other_seed_differs():
    a, b, c = MTRandom(121321), MTRandom(121321), MTRandom(0)
    sa = [a.next32() for _ in range(700)]  # crosses one twist
    assert sa == [b.next32() for _ in range(700)]
    assert sa[:10] != [c.next32() for _ in range(10)]

def test_below_is_modulo_of_next32():
    a, b = MTRandom(42), MTRandom(42)
    for n in (1, 3, 4, 10):
        assert a.below(n) == b.next32() % n

def test_below_rejects_non_positive():
    with pytest.raises(ValueError):
        MTRandom(0).below(0)
