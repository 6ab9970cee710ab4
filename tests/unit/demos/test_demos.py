"""Tests for the demo walkthroughs and the CLI driver."""

import pytest

from src.demos import DEMOS, run_all
from src.demos import prototype_demo, proxy_demo, singleton_demo
from src.main import main


class TestPrototypeDemo:
    """Tests for the prototype walkthrough."""

    def test_lines(self):
        """Test the dog walkthrough output."""
        lines = prototype_demo.run()

        assert "Daisy says Woof!" in lines
        assert "Max: Playing now!" in lines
        assert "Spot: Playing now!" in lines
        assert "SuperDog chain: SuperDog -> Dog" in lines
        assert "Daisy (SuperDog) flies: Flying!" in lines
        assert "Pet with no own data barks: Woof!" in lines

    def test_repeatable(self):
        """Test the demo uses its own registry and gives the same output twice."""
        assert prototype_demo.run() == prototype_demo.run()


class TestSingletonDemo:
    """Tests for the singleton walkthrough."""

    def test_lines(self, clean_env):
        """Test the counter walkthrough output."""
        lines = singleton_demo.run()

        assert lines[0] == "Start count: 0"
        assert "increment -> 1" in lines
        assert "decrement -> 1" in lines
        assert any(line.startswith("Second construction failed") for line in lines)
        assert "get_instance() returns the same handle: True" in lines
        assert "count seen by first reference: 2" in lines
        assert "decrement after overwrite attempt -> 1" in lines
        assert "plain frozen counter increment -> 1" in lines


class TestProxyDemo:
    """Tests for the proxy walkthrough."""

    def test_lines(self):
        """Test the person walkthrough output."""
        lines = proxy_demo.run()

        assert lines == [
            "Passthrough read of name: John Doe",
            "The value of name is John Doe",
            "Changed age from 42 to 33",
            "This property doesn't exist in object",
            "Sorry you can only pass numeric value for age",
            "Changed name from John Doe to Thanos.",
            "Final person: {'name': 'Thanos', 'age': 33, 'nationality': 'American'}",
        ]


class TestRunAll:
    """Tests for the demo registry."""

    def test_runs_every_demo(self):
        """Test run_all runs all demos by default."""
        results = run_all()
        assert list(results) == list(DEMOS)
        assert all(results.values())

    def test_runs_selected(self):
        """Test run_all honors a selection."""
        assert list(run_all(["proxy"])) == ["proxy"]

    def test_unknown_demo(self):
        """Test unknown names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown demo"):
            run_all(["observer"])


class TestMain:
    """Tests for the CLI entry point."""

    def test_list(self, capsys):
        """Test --list prints demo names."""
        assert main(["--list"]) == 0
        out = capsys.readouterr().out
        assert out.split() == list(DEMOS)

    def test_runs_selected_demo(self, capsys, clean_env):
        """Test --demo prints that demo's lines."""
        assert main(["--demo", "proxy"]) == 0
        out = capsys.readouterr().out
        assert "=== proxy ===" in out
        assert "Changed name from John Doe to Thanos." in out
        assert "=== prototype ===" not in out

    def test_quiet(self, capsys):
        """Test --quiet suppresses output lines."""
        assert main(["--quiet"]) == 0
        assert "===" not in capsys.readouterr().out

    def test_rejects_unknown_demo(self):
        """Test argparse rejects unknown demo names."""
        with pytest.raises(SystemExit):
            main(["--demo", "observer"])
