import pytest

from fixed8.demo import basics_lines, conversion_lines, main, operators_lines
from fixed8.fixed import Fixed


def _value_after(lines, prefix):
    matches = [line[len(prefix):] for line in lines if line.startswith(prefix)]
    assert len(matches) == 1
    return matches[0]


def test_basics_lines_all_zero():
    assert basics_lines() == ["0", "0", "0"]


def test_conversion_lines_match_reference_output():
    assert conversion_lines() == [
        "a is 1234.43",
        "b is 10",
        "c is 42.4219",
        "d is 10",
        "a is 1234 as integer",
        "b is 10 as integer",
        "c is 42 as integer",
        "d is 10 as integer",
    ]


def test_operators_lines_sections_in_order():
    lines = operators_lines()
    headers = [line for line in lines if line.startswith("=====")]
    assert headers == [
        "===== CONSTRUCTORS =====",
        "===== BASIC VALUES =====",
        "===== COMPARISON OPERATORS =====",
        "===== ARITHMETIC OPERATORS =====",
        "===== INCREMENT/DECREMENT OPERATORS =====",
        "===== MIN/MAX FUNCTIONS =====",
        "===== REQUIRED TEST =====",
    ]
    for header in headers[1:]:
        assert lines[lines.index(header) - 1] == ""


def test_operators_basic_values_consistent():
    lines = operators_lines()
    assert _value_after(lines, "a: ") == "0"
    assert _value_after(lines, "b: ") == _value_after(lines, "d: ")
    assert _value_after(lines, "c: ") == _value_after(lines, "e: ")
    assert _value_after(lines, "b: ") == str(Fixed(123))


def test_operators_comparisons_are_flags():
    lines = operators_lines()
    results = {
        key: _value_after(lines, key + ": ")
        for key in ("b > c", "b < c", "b >= d", "b <= d", "b == d", "c != e")
    }
    assert set(results.values()) <= {"0", "1"}
    assert results["b > c"] != results["b < c"]
    assert results["b >= d"] == results["b <= d"] == results["b == d"] == "1"
    assert results["c != e"] == "0"


def test_operators_arithmetic_uses_fixed_results():
    lines = operators_lines()
    b, c = Fixed(123), Fixed(456.789)
    assert _value_after(lines, "b + c = ") == str(b + c)
    assert _value_after(lines, "c - b = ") == str(c - b)
    assert _value_after(lines, "b * c = ") == str(b * c)
    assert _value_after(lines, "c / b = ") == str(c / b)


def test_operators_stepping_sequence():
    lines = operators_lines()
    start = lines.index("===== INCREMENT/DECREMENT OPERATORS =====") + 1
    step = lines[start:start + 9]
    values = [line.split(": ", 1)[1] for line in step]
    one = str(Fixed.from_raw(1))
    two = str(Fixed.from_raw(2))
    assert values == ["0", one, one, one, two, one, one, one, "0"]


def test_operators_min_max():
    lines = operators_lines()
    assert _value_after(lines, "min(b, c): ") == str(Fixed(123))
    assert _value_after(lines, "min(const_b, const_c): ") == str(Fixed(123))
    assert _value_after(lines, "max(b, c): ") == str(Fixed(456.789))
    assert _value_after(lines, "max(const_b, const_c): ") == str(Fixed(456.789))


def test_operators_required_test_tail():
    lines = operators_lines()
    tail = lines[lines.index("===== REQUIRED TEST =====") + 1:]
    one = str(Fixed.from_raw(1))
    two = str(Fixed.from_raw(2))
    y = str(Fixed(5.05) * Fixed(2))
    assert tail == ["0", one, one, one, two, y, y]


def test_main_prints_chosen_demo(capsys):
    assert main(["conversion"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == conversion_lines()


def test_main_default_prints_everything(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == basics_lines() + conversion_lines() + operators_lines()


def test_main_rejects_unknown_demo(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["nonsense"])
    assert excinfo.value.code == 2