import pytest

from config.settings import reload_settings
from fieldsim import cli
from fieldsim.data.models import FieldType


def test_batch_mode(capsys):
    assert cli.main(["--batch", "20", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "Scenario Summary (20 x scalar)" in out


def test_batch_forced_vector_scenario():
    import numpy as np

    summary = cli.run_batch(10, FieldType.VECTOR, np.random.default_rng(0), "uniform")
    assert len(summary) == 10
    assert set(summary["label"]) == {"Uniform Wind Flow"}


def test_snapshot_mode(tmp_path):
    output = tmp_path / "wind.png"
    code = cli.main([
        "--field-type", "vector",
        "--scenario", "rotational",
        "--seed", "2",
        "--output", str(output),
    ])
    assert code == 0
    assert output.exists()


def test_scenario_must_match_field_type():
    assert cli.main(["--field-type", "scalar", "--scenario", "rotational", "--batch", "2"]) == 1


def test_batch_must_be_positive():
    with pytest.raises(SystemExit):
        cli.main(["--batch", "0"])


def test_unknown_field_type_rejected():
    with pytest.raises(SystemExit):
        cli.main(["--field-type", "pressure"])


def test_relative_output_goes_to_configured_directory(tmp_path, monkeypatch):
    output_dir = tmp_path / "renders"
    monkeypatch.setenv("FIELDSIM_OUTPUT_DIR", str(output_dir))
    try:
        reload_settings()
        assert cli.main(["--seed", "1", "--output", "snap.png"]) == 0
        assert (output_dir / "snap.png").exists()
    finally:
        monkeypatch.undo()
        reload_settings()


def test_absolute_output_is_kept(tmp_path):
    target = tmp_path / "wind.png"
    assert cli.resolve_output_path(target, tmp_path / "renders") == target


@pytest.mark.parametrize("dpi", ["0", "71", "601", "high"])
def test_dpi_outside_range_rejected(dpi):
    with pytest.raises(SystemExit):
        cli.main(["--output", "snap.png", "--dpi", dpi])


def test_dpi_within_range_accepted():
    assert cli.create_parser().parse_args(["--dpi", "150"]).dpi == 150
