import calendar
import math

import pytest

from algokit.arithmetic import (
    MOD,
    NOTES,
    WEEKDAYS,
    binomial_mod,
    count_notes,
    factorial,
    factorial_digits,
    factors,
    fibonacci,
    gcd,
    is_leap_year,
    new_year_weekday,
    power,
    power_sum_mod,
    russian_peasant_multiply,
    stirling_second_kind,
    sum_first_n,
    sum_first_n_even,
)


def test_gcd_matches_math():
    for a in range(0, 60):
        for b in range(0, 60):
            assert gcd(a, b) == math.gcd(a, b)


def test_gcd_ignores_sign():
    assert gcd(-12, 18) == gcd(12, 18)


def test_factorial_matches_math():
    for n in range(0, 30):
        assert factorial(n) == math.factorial(n)


def test_factorial_rejects_negative():
    with pytest.raises(ValueError):
        factorial(-1)


def test_factorial_digits_large():
    for n in (0, 1, 25, 100, 500):
        assert factorial_digits(n) == str(math.factorial(n))


def test_fibonacci_first_terms():
    assert fibonacci(10) == [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]


def test_fibonacci_recurrence():
    terms = fibonacci(60)
    assert len(terms) == 60
    for i in range(2, len(terms)):
        assert terms[i] == terms[i - 1] + terms[i - 2]


def test_fibonacci_empty():
    assert fibonacci(0) == []
    assert fibonacci(-3) == []


def test_sum_first_n_steps():
    assert sum_first_n(0) == 0
    for n in range(1, 100):
        assert sum_first_n(n) - sum_first_n(n - 1) == n


def test_sum_first_n_even_steps():
    assert sum_first_n_even(0) == 0
    for n in range(1, 100):
        assert sum_first_n_even(n) - sum_first_n_even(n - 1) == 2 * (n - 1)


def test_sum_first_n_even_rejects_negative():
    with pytest.raises(ValueError):
        sum_first_n_even(-1)


def test_power_matches_builtin():
    for base in range(-5, 8):
        for exponent in range(0, 20):
            assert power(base, exponent) == base**exponent


def test_power_rejects_negative_exponent():
    with pytest.raises(ValueError):
        power(2, -1)


def test_factors_divide_and_pair_up():
    for n in range(1, 200):
        divisors = factors(n)
        assert divisors[0] == 1 and divisors[-1] == n
        assert divisors == sorted(divisors)
        for d in divisors:
            assert n % d == 0
            assert n // d in divisors


def test_factors_of_prime():
    assert factors(13) == [1, 13]


def test_russian_peasant_matches_product():
    for a in range(-20, 21):
        for b in range(-20, 21):
            assert russian_peasant_multiply(a, b) == a * b


def test_binomial_mod_matches_comb():
    for n in range(0, 40):
        for r in range(0, n + 1):
            assert binomial_mod(n, r) == math.comb(n, r) % MOD


def test_binomial_mod_custom_modulus():
    assert binomial_mod(100, 50, 97) == math.comb(100, 50) % 97


def test_binomial_mod_rejects_bad_arguments():
    with pytest.raises(ValueError):
        binomial_mod(3, 5)
    with pytest.raises(ValueError):
        binomial_mod(3, -1)


def test_stirling_row_counts_set_partitions():
    # Summing S(k, i) over i * i! counts the surjections, whose total over
    # all target sizes equals the ordered set partitions; check via x**k.
    for k in range(1, 10):
        row = stirling_second_kind(k)
        for x in range(0, 6):
            total = sum(row[i] * math.perm(x, i) for i in range(k + 1))
            assert total == x**k


def test_stirling_rejects_negative():
    with pytest.raises(ValueError):
        stirling_second_kind(-1)


def test_power_sum_mod_small_values():
    for k in range(1, 7):
        for x in range(0, 30):
            expected = sum(n**k for n in range(1, x + 1)) % MOD
            assert power_sum_mod(x, k) == expected


def test_power_sum_mod_rejects_bad_arguments():
    with pytest.raises(ValueError):
        power_sum_mod(5, 0)
    with pytest.raises(ValueError):
        power_sum_mod(-1, 2)


def test_count_notes_reassembles_amount():
    for amount in (0, 1, 3, 99, 2000, 3888, 123456):
        counts = count_notes(amount)
        assert list(counts) == list(NOTES)
        assert sum(note * n for note, n in counts.items()) == amount


def test_count_notes_uses_largest_first():
    counts = count_notes(2000)
    assert counts[2000] == 1
    assert sum(counts.values()) == 1


def test_count_notes_rejects_negative():
    with pytest.raises(ValueError):
        count_notes(-10)


def test_leap_years_match_calendar():
    for year in range(1, 3000):
        assert is_leap_year(year) == calendar.isleap(year)


def test_new_year_weekday_known_value():
    assert new_year_weekday(2000) == "Saturday"


def test_new_year_weekday_advances():
    for year in range(1801, 2200):
        previous = WEEKDAYS.index(new_year_weekday(year - 1))
        current = WEEKDAYS.index(new_year_weekday(year))
        step = 2 if is_leap_year(year - 1) else 1
        assert current == (previous + step) % 7