import pytest

from benchpress.schemas.results import SampleResult
from benchpress.utils.cli import format_duration, print_sample_result


@pytest.mark.parametrize("seconds, expected", [
    (1.5, "1.500 s"),
    (0.012, "12.000 ms"),
    (0.00000325, "3.250 us"),
])
def test_format_duration(seconds, expected):
    assert format_duration(seconds) == expected


def test_print_sample_result(capsys):
    result = SampleResult(
        sample_id="fib",
        description={"target": "bench:fib"},
        durations=[0.002, 0.003],
        microiterations=10,
    )

    print_sample_result(result, "results/fib.json")

    out = capsys.readouterr().out
    assert "Сэмпл fib" in out
    assert "target: bench:fib" in out
    assert "Замеров: 2" in out
    assert "2.000 ms, 3.000 ms" in out
    assert "Результат: results/fib.json" in out


def test_print_sample_result_without_path(capsys):
    result = SampleResult(sample_id="noop", durations=[1.0], microiterations=1)

    print_sample_result(result)

    assert "Результат" not in capsys.readouterr().out
