"""Tests for the command line tool."""

import json
import math

from cosmic_expansion.run_expansion import main, parse_args, to_json_value


class TestJsonValues:
    """Tests for to_json_value."""

    def test_infinities(self):
        """Non-finite floats become strings."""
        assert to_json_value(math.inf) == "Infinity"
        assert to_json_value(-math.inf) == "-Infinity"
        assert to_json_value(math.nan) == "NaN"

    def test_nested(self):
        """Containers are converted recursively."""
        value = {"rows": [{"s": math.inf, "t": 0.0}], "age": 13.8}
        assert to_json_value(value) == {"rows": [{"s": "Infinity", "t": 0.0}], "age": 13.8}


class TestParseArgs:
    """Tests for argument parsing."""

    def test_defaults(self):
        """Without flags the present epoch is tabulated."""
        args = parse_args([])
        assert args.stretch == [1.0]
        assert args.steps == 8
        assert not args.exponential
        assert not args.age

    def test_range_flags(self):
        """Range options are parsed into numbers."""
        args = parse_args(
            ["--stretch", "1090", "0.5", "--steps", "20", "--exponential", "--omega-lambda0", "0.7"]
        )
        assert args.stretch == [1090.0, 0.5]
        assert args.steps == 20
        assert args.exponential
        assert args.omega_lambda0 == 0.7


class TestMain:
    """Tests for main."""

    def test_age_to_file(self, tmp_path):
        """--age writes the age and parameters."""
        output = tmp_path / "age.json"
        assert main(["--age", "-q", "-o", str(output)]) == 0

        data = json.loads(output.read_text())
        assert abs(data["age"] - 13.8) < 0.05
        assert data["parameters"]["survey"] == "planck2018"
        assert "results" not in data

    def test_range_to_stdout(self, capsys):
        """A range with the singularity prints a JSON table."""
        code = main(["--stretch", "10", "1", "--steps", "3", "--include-infinity", "-q"])
        assert code == 0

        data = json.loads(capsys.readouterr().out)
        rows = data["results"]
        assert rows[0]["s"] == "Infinity"
        assert rows[0]["v_gen"] == "Infinity"
        assert rows[0]["t"] == 0.0
        assert [row["s"] for row in rows[1:]] == [10.0, 7.0, 4.0, 1.0]

    def test_params_file(self, tmp_path):
        """Options can come from a JSON file, with flags taking precedence."""
        params = tmp_path / "params.json"
        params.write_text(json.dumps({"survey": "wmap2013", "zeq": 3000}))
        output = tmp_path / "out.json"

        assert main(["-p", str(params), "--h0", "70", "--age", "-q", "-o", str(output)]) == 0

        parameters = json.loads(output.read_text())["parameters"]
        assert parameters["survey"] == "wmap2013"
        assert parameters["zeq"] == 3000
        assert parameters["h0"] == 70.0

    def test_invalid_parameters(self, capsys):
        """Unphysical input exits with status 2 and no output."""
        assert main(["--h0", "-5", "-q"]) == 2
        assert capsys.readouterr().out == ""

    def test_unknown_option_in_params_file(self, tmp_path):
        """Unknown keys in the parameter file are reported."""
        params = tmp_path / "params.json"
        params.write_text(json.dumps({"hubble": 70}))
        assert main(["-p", str(params), "-q"]) == 2

    def test_invalid_range(self):
        """A bad range exits with status 2."""
        assert main(["--stretch", "2", "2", "-q"]) == 2
