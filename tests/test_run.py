# tests/test_run.py

"""
Tests for the run interface, the output writer and the command line.
"""

import logging

import pandas as pd
import pytest
import yaml

from imbus.__main__ import main
from imbus.interfaces import CalculationPath
from imbus.output import OutputWriter
from imbus.run import run, run_from_directory
from imbus.validation import NoComputableProxyError


@pytest.fixture(autouse=True)
def reset_imbus_logger():
    yield
    logger = logging.getLogger("imbus")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


class TestRun:
    """Test run and run_from_directory."""

    def test_run(self, full_data):
        result = run(full_data, proxies=["Fdist"])
        assert result.path is CalculationPath.SPECIES
        assert result.proxies == ("Fdist",)

    def test_run_from_directory(self, survey_dir):
        result = run_from_directory(survey_dir, proxies=["Feff", "Frealised"], fished=False)
        assert result.proxies == ("Feff", "Frealised")
        assert "Frealised" in result.table.columns

    def test_run_errors_propagate(self, effort_only_data):
        with pytest.raises(NoComputableProxyError):
            run(effort_only_data, proxies=["Fdist"])


class TestOutputWriter:
    """Test OutputWriter."""

    def test_write_result(self, tmp_path, full_data):
        result = run(full_data)
        path = OutputWriter(str(tmp_path / "out")).write_result(result)

        written = pd.read_csv(path)
        assert len(written) == len(result.table)
        assert "Frealised" in written.columns

    def test_write_result_summary(self, tmp_path, full_data):
        result = run(full_data, proxies=["Fdist"])
        OutputWriter(tmp_path).write_result(result, name="cod")

        with open(tmp_path / "cod.yaml") as f:
            summary = yaml.safe_load(f)
        assert summary["path"] == "species"
        assert summary["proxies"] == ["Fdist"]
        assert summary["rows"] == len(result.table)
        assert (tmp_path / "cod.csv").exists()


class TestCli:
    """Test the command line entry point."""

    def test_writes_proxies_csv(self, survey_dir, tmp_path):
        out_dir = tmp_path / "out"
        code = main(["--input", str(survey_dir), "--proxies", "Fdist", "--output", str(out_dir)])

        assert code == 0
        written = pd.read_csv(out_dir / "proxies.csv")
        assert "Fdist" in written.columns
        assert "Feff" not in written.columns

    def test_prints_summary(self, survey_dir, capsys):
        code = main(["--input", str(survey_dir), "--proxies", "Feff", "--unfished"])

        assert code == 0
        assert "feff_only" in capsys.readouterr().out

    def test_log_dir(self, survey_dir, tmp_path):
        log_dir = tmp_path / "logs"
        main(["--input", str(survey_dir), "--log-dir", str(log_dir)])
        assert len(list(log_dir.glob("*.log"))) == 1

    def test_config_file(self, survey_dir, tmp_path):
        config_path = tmp_path / "fields.yaml"
        config_path.write_text("gear_field: Gear\n")
        code = main(["--input", str(survey_dir), "--config", str(config_path)])
        assert code == 1

    def test_error_exit_code(self, survey_dir, capsys):
        (survey_dir / "species.csv").unlink()
        code = main(["--input", str(survey_dir), "--proxies", "Fdist"])

        assert code == 1
        assert "No requested proxies" in capsys.readouterr().err
