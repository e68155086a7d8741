"""Tests for the CLI frontend."""

import argparse
from unittest.mock import Mock, patch
from io import StringIO

from torus_life.core.grid import ALIVE_GLYPH, DEAD_GLYPH
from torus_life.frontends.cli import (
    CLIUniverse,
    create_parser,
    describe_mode,
    print_results,
    validate_args,
    main,
)


def _frame_lines(output):
    return [line for line in output.splitlines() if line and set(line) <= {ALIVE_GLYPH, DEAD_GLYPH}]


class TestCLIUniverse:
    """Test cases for the CLI driver."""

    @patch("sys.stdout", new_callable=StringIO)
    def test_run_simulation_prints_every_frame(self, mock_stdout):
        """Test that the initial frame and one frame per tick are printed."""
        cli = CLIUniverse()

        stats = cli.run_simulation(mode=0, generations=2)

        assert stats["generation"] == 2
        assert stats["initial_population"] == 36
        assert len(_frame_lines(mock_stdout.getvalue())) == 3 * 64

    @patch("sys.stdout", new_callable=StringIO)
    def test_run_simulation_quiet(self, mock_stdout):
        """Test that quiet mode prints only the final frame."""
        cli = CLIUniverse()

        stats = cli.run_simulation(mode=2, generations=4, quiet=True)

        assert stats["generation"] == 4
        assert len(_frame_lines(mock_stdout.getvalue())) == 64

    @patch("sys.stdout", new_callable=StringIO)
    def test_run_simulation_verbose(self, mock_stdout):
        """Test verbose frame headers."""
        cli = CLIUniverse()

        cli.run_simulation(mode=0, generations=1, verbose=True)

        output = mock_stdout.getvalue()
        assert "Initializing 64x64 universe (glider gun)" in output
        assert "Generation 0 (population 36)" in output
        assert "Generation 1 (population" in output

    @patch("sys.stdout", new_callable=StringIO)
    def test_run_simulation_seeded(self, mock_stdout):
        """Test that a seed makes random runs reproducible."""
        cli = CLIUniverse()

        first = cli.run_simulation(mode=1, generations=3, seed=9, quiet=True)
        second = cli.run_simulation(mode=1, generations=3, seed=9, quiet=True)

        assert first["initial_population"] == second["initial_population"]
        assert first["population"] == second["population"]

    @patch("torus_life.frontends.cli.time.sleep")
    @patch("sys.stdout", new_callable=StringIO)
    def test_run_simulation_delay(self, mock_stdout, mock_sleep):
        """Test that the delay is applied between generations."""
        CLIUniverse().run_simulation(mode=0, generations=3, delay=0.25, quiet=True)

        assert mock_sleep.call_count == 3
        mock_sleep.assert_called_with(0.25)

    def test_describe_mode(self):
        assert describe_mode(0) == "glider gun"
        assert describe_mode(1) == "random"
        assert describe_mode(42) == "parity pattern"


class TestParserAndValidation:
    """Test cases for argument parsing and validation."""

    def test_parser_defaults(self):
        args = create_parser().parse_args([])

        assert args.mode == 0
        assert args.generations == 10
        assert args.seed is None
        assert args.delay == 0.0
        assert not args.quiet
        assert not args.verbose

    def test_parser_options(self):
        args = create_parser().parse_args(["-m", "1", "-n", "5", "--seed", "3", "-d", "0.1", "-q"])

        assert args.mode == 1
        assert args.generations == 5
        assert args.seed == 3
        assert args.delay == 0.1
        assert args.quiet

    def test_validate_args_valid(self):
        args = argparse.Namespace(generations=0, delay=0.0, quiet=False, verbose=True)
        assert validate_args(args) is True

    @patch("sys.stdout", new_callable=StringIO)
    def test_validate_args_invalid(self, mock_stdout):
        args = argparse.Namespace(generations=-1, delay=-0.5, quiet=True, verbose=True)

        assert validate_args(args) is False

        output = mock_stdout.getvalue()
        assert "Generations must be non-negative" in output
        assert "Delay must be non-negative" in output
        assert "cannot be combined" in output


class TestPrintResults:
    """Test cases for the run summary."""

    @patch("sys.stdout", new_callable=StringIO)
    def test_print_results_verbose(self, mock_stdout):
        stats = {
            "mode": 0,
            "generation": 10,
            "initial_population": 36,
            "population": 48,
            "duration_seconds": 0.5,
            "generations_per_second": 20.0,
        }

        print_results(stats, verbose=True)

        output = mock_stdout.getvalue()
        assert "Simulation completed after 10 generations" in output
        assert "Mode: glider gun" in output
        assert "Final population: 48" in output

    @patch("sys.stdout", new_callable=StringIO)
    def test_print_results_compact(self, mock_stdout):
        stats = {"mode": 2, "generation": 3, "initial_population": 10, "population": 4}

        print_results(stats, verbose=False)

        assert "Population: 10 -> 4" in mock_stdout.getvalue()


class TestMain:
    """Test cases for the entry point."""

    @patch("sys.stdout", new_callable=StringIO)
    def test_main_successful_run(self, mock_stdout):
        with patch("sys.argv", ["torus-life", "--mode", "0", "--generations", "2", "--quiet"]):
            result = main()

        assert result == 0
        assert "Simulation completed after 2 generations" in mock_stdout.getvalue()

    @patch("sys.stdout", new_callable=StringIO)
    def test_main_invalid_args(self, mock_stdout):
        with patch("sys.argv", ["torus-life", "--generations", "-5"]):
            result = main()

        assert result == 1

    @patch("torus_life.frontends.cli.CLIUniverse")
    @patch("sys.stdout", new_callable=StringIO)
    def test_main_interrupted(self, mock_stdout, mock_cli_class):
        mock_cli = Mock()
        mock_cli.run_simulation.side_effect = KeyboardInterrupt
        mock_cli_class.return_value = mock_cli

        with patch("sys.argv", ["torus-life"]):
            result = main()

        assert result == 1
        assert "interrupted" in mock_stdout.getvalue()

    @patch("torus_life.frontends.cli.CLIUniverse")
    @patch("sys.stdout", new_callable=StringIO)
    def test_main_error(self, mock_stdout, mock_cli_class):
        mock_cli = Mock()
        mock_cli.run_simulation.side_effect = RuntimeError("boom")
        mock_cli_class.return_value = mock_cli

        with patch("sys.argv", ["torus-life"]):
            result = main()

        assert result == 1
        assert "Error: boom" in mock_stdout.getvalue()
