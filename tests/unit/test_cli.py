"""
Unit tests for the command line interface.
"""

import json

from nordid.cli import main


class TestCli:
    """Tests for nordid main()."""

    def test_valid_number(self, capsys):
        """Test a valid number prints its scheme."""
        assert main(["19130401+2931"]) == 0
        out = capsys.readouterr().out
        assert "PERSONAL_IDENTITY_NUMBER" in out
        assert "130401+2931" in out

    def test_invalid_number(self, capsys):
        """Test an invalid number sets the exit status."""
        assert main(["--json", "Just a string"]) == 1
        result = json.loads(capsys.readouterr().out)
        assert result["valid"] is False

    def test_long_json(self, capsys):
        """Test JSON output in the long format."""
        assert main(["--json", "--long", "992004920019"]) == 0
        result = json.loads(capsys.readouterr().out)
        assert result["scheme"] == "SLL_RESERVE_NUMBER"
        assert result["formatted"] == "992004920019"
        assert result["age"] == -1

    def test_no_coordination(self, capsys):
        """Test turning coordination numbers off."""
        assert main(["--no-coordination", "701063-2391"]) == 1
