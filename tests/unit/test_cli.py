"""Unit tests for the command-line interface."""

import json

import pytest
from click.testing import CliRunner

from effort_analytics.cli import main

AS_OF = ["--as-of", "2024-06-30"]
BIKE_POWER = ["--category", "bike", "--effort-type", "power"]
RUN_SPEED = ["--category", "run", "--effort-type", "speed"]


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Click test runner."""
    return CliRunner()


class TestCurveCommand:
    """Test the curve command."""

    def test_prints_curve(self, runner, sample_efforts_csv):
        """The curve lists every duration with its source activity."""
        result = runner.invoke(
            main, ["curve", str(sample_efforts_csv), *BIKE_POWER, *AS_OF]
        )

        assert result.exit_code == 0, result.output
        assert "Season-Best Curve" in result.output
        assert "ride-b" in result.output
        assert "ride-old" not in result.output

    def test_json_output(self, runner, sample_efforts_csv):
        """JSON output lists points in ascending duration."""
        result = runner.invoke(
            main, ["curve", str(sample_efforts_csv), *BIKE_POWER, *AS_OF, "--json"]
        )

        assert result.exit_code == 0, result.output
        points = json.loads(result.stdout)
        assert [p["duration_seconds"] for p in points] == [60, 300, 600, 1200]
        assert points[0]["value"] == 450.0

    def test_empty_window(self, runner, sample_efforts_csv):
        """An empty window is reported, not an error."""
        args = ["curve", str(sample_efforts_csv), *BIKE_POWER, *AS_OF]
        result = runner.invoke(main, [*args, "--window-days", "5"])

        assert result.exit_code == 0, result.output
        assert "No efforts in the selected window" in result.output

    def test_requires_category(self, runner, sample_efforts_csv):
        """Category and effort type are required options."""
        result = runner.invoke(main, ["curve", str(sample_efforts_csv)])

        assert result.exit_code == 2

    def test_zero_window_rejected(self, runner, sample_efforts_csv):
        """Window length must be at least one day."""
        result = runner.invoke(
            main,
            ["curve", str(sample_efforts_csv), *BIKE_POWER, "--window-days", "0"],
        )

        assert result.exit_code == 2


class TestFitCommand:
    """Test the fit command."""

    def test_prints_model(self, runner, sample_efforts_csv):
        """The fitted model and prediction table are printed."""
        result = runner.invoke(
            main, ["fit", str(sample_efforts_csv), *BIKE_POWER, *AS_OF]
        )

        assert result.exit_code == 0, result.output
        assert "CP: 262.86 watts" in result.output
        assert "W': 21000" in result.output
        assert "5min: 333 watts" in result.output

    def test_json_uses_w_prime_alias(self, runner, sample_efforts_csv):
        """JSON output carries the tagged result with wPrime."""
        result = runner.invoke(
            main, ["fit", str(sample_efforts_csv), *BIKE_POWER, *AS_OF, "--json"]
        )

        payload = json.loads(result.stdout)
        assert payload["status"] == "ok"
        assert payload["qualifying_points"] == 3
        assert payload["model"]["wPrime"] == pytest.approx(21000.0)

    def test_insufficient_data(self, runner, sample_efforts_csv):
        """A failed fit prints the reason."""
        result = runner.invoke(
            main,
            ["fit", str(sample_efforts_csv), *BIKE_POWER, *AS_OF, "--window-days", "5"],
        )

        assert result.exit_code == 0, result.output
        assert "Not enough data" in result.output

    def test_config_file(self, runner, fixtures_dir):
        """The efforts file can come from the config file."""
        result = runner.invoke(
            main,
            [
                "fit",
                "--config",
                str(fixtures_dir / "sample_config.yaml"),
                *BIKE_POWER,
                *AS_OF,
            ],
        )

        assert result.exit_code == 0, result.output
        assert "CP: 262.86 watts" in result.output


class TestPredictCommand:
    """Test the predict command."""

    def test_power_prediction(self, runner, sample_efforts_csv):
        """The prediction is printed with its unit."""
        result = runner.invoke(
            main,
            [
                "predict",
                str(sample_efforts_csv),
                *BIKE_POWER,
                *AS_OF,
                "--duration",
                "300",
            ],
        )

        assert result.exit_code == 0, result.output
        assert "300s: 333 watts" in result.output

    def test_speed_prediction(self, runner, sample_efforts_csv):
        """Speed predictions are rounded m/s values."""
        result = runner.invoke(
            main,
            [
                "predict",
                str(sample_efforts_csv),
                *RUN_SPEED,
                *AS_OF,
                "--duration",
                "600",
            ],
        )

        assert result.exit_code == 0, result.output
        assert "600s: 4 m/s" in result.output

    def test_json_outcome(self, runner, sample_efforts_csv):
        """JSON output is the tagged prediction outcome."""
        result = runner.invoke(
            main,
            [
                "predict",
                str(sample_efforts_csv),
                *BIKE_POWER,
                *AS_OF,
                "--duration",
                "1200",
                "--json",
            ],
        )

        payload = json.loads(result.stdout)
        assert payload["status"] == "ok"
        assert payload["prediction"]["predicted_value"] == 280
        assert payload["prediction"]["unit"] == "watts"

    def test_non_positive_duration_aborts(self, runner, sample_efforts_csv):
        """Invalid durations abort the command."""
        result = runner.invoke(
            main,
            [
                "predict",
                str(sample_efforts_csv),
                *BIKE_POWER,
                *AS_OF,
                "--duration",
                "0",
            ],
        )

        assert result.exit_code == 1

    def test_unreadable_file_aborts(self, runner, tmp_path):
        """Data load errors abort the command."""
        csv_file = tmp_path / "efforts.csv"
        csv_file.write_text("activity_id;value\nride-a;300\n", encoding="utf-8")

        result = runner.invoke(
            main,
            ["predict", str(csv_file), *BIKE_POWER, *AS_OF, "--duration", "300"],
        )

        assert result.exit_code == 1


class TestBaselineCommand:
    """Test the baseline command."""

    def test_ftp_baseline(self, runner):
        """An FTP yields a watts curve."""
        result = runner.invoke(main, ["baseline", "--ftp", "250"])

        assert result.exit_code == 0, result.output
        assert "300s  317 watts" in result.output

    def test_css_baseline_json(self, runner):
        """A CSS pace yields a swim curve as JSON."""
        result = runner.invoke(main, ["baseline", "--css", "100", "--json"])

        efforts = json.loads(result.stdout)
        assert efforts[0]["activity_category"] == "swim"
        assert efforts[0]["value"] == pytest.approx(1.1)

    @pytest.mark.parametrize(
        "args", [[], ["--ftp", "250", "--css", "100"]], ids=["none", "two"]
    )
    def test_exactly_one_threshold(self, runner, args):
        """Exactly one threshold option must be passed."""
        result = runner.invoke(main, ["baseline", *args])

        assert result.exit_code == 2

    def test_invalid_threshold_aborts(self, runner):
        """Non-positive thresholds abort the command."""
        result = runner.invoke(main, ["baseline", "--threshold-pace", "0"])

        assert result.exit_code == 1
