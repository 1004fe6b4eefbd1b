import pytest

from scatterkit.multiple_parser import MultipleSignalParametersParser
from scatterkit.parameters import ScatteringMode
from scatterkit.utility import radians

MODES = (ScatteringMode.P21, ScatteringMode.P22)

CONTENT = (
    "1.33\t10\t5\t11\t12\t0.1\t0.2\t0.3\t0.4\n"
    "1.33\t30\t5\t31\t32\t0.5\t0.6\t0.7\t0.8\n"
)


@pytest.fixture
def param_file(tmp_path):
    path = tmp_path / "p21p22.txt"
    path.write_text(CONTENT)
    return path


def test_parse_reads_both_modes(param_file):
    holder = MultipleSignalParametersParser().parse(MODES, param_file, 30.0)
    p21 = holder[ScatteringMode.P21]
    p22 = holder[ScatteringMode.P22]
    assert p21.theta == pytest.approx(radians(31.0))
    assert (p21.amp_p1, p21.amp_p2) == (0.5, 0.6)
    assert p22.theta == pytest.approx(radians(32.0))
    assert (p22.amp_p1, p22.amp_p2) == (0.7, 0.8)
    assert p21.m == 1.33
    assert p22.theta_sca == 30.0
    assert p22.mode is ScatteringMode.P22
    assert len(holder) == 2


def test_parse_missing_angle_returns_empty_holder(param_file):
    with pytest.warns(UserWarning, match="doesn't have 45 scattering angle"):
        holder = MultipleSignalParametersParser().parse(MODES, param_file, 45.0)
    assert len(holder) == 0
    with pytest.raises(KeyError):
        holder[ScatteringMode.P21]


def test_parse_malformed_matching_line_raises(tmp_path):
    path = tmp_path / "short.txt"
    path.write_text("1.33\t10\t5\t11\t12\t0.1\n")
    with pytest.raises(ValueError):
        MultipleSignalParametersParser().parse(MODES, path, 10.0)


def test_parse_many_collects_in_order(param_file):
    holder = MultipleSignalParametersParser().parse_many(MODES, param_file, [10.0, 30.0])
    p21 = holder.select(ScatteringMode.P21)
    p22 = holder.select(ScatteringMode.P22)
    assert [p.theta_sca for p in p21] == [10.0, 30.0]
    assert [p.amp_p1 for p in p22] == [0.3, 0.7]
    assert len(holder) == 4


def test_parse_many_stops_after_last_angle(param_file):
    holder = MultipleSignalParametersParser().parse_many(MODES, param_file, [10.0])
    assert len(holder) == 2
    assert holder[ScatteringMode.P21].theta_sca == 10.0


def test_parse_many_nothing_found_warns(param_file):
    with pytest.warns(UserWarning, match="No angles"):
        holder = MultipleSignalParametersParser().parse_many(MODES, param_file, [70.0])
    assert len(holder) == 0


def test_parse_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        MultipleSignalParametersParser().parse(MODES, tmp_path / "absent.txt", 10.0)