"""Unit tests for FC-style slash switches."""

import pytest
from pyfc.cli.switches import SwitchError, apply_switches, is_switch, split_arguments
from pyfc.models.options import CompareOptions


class TestIsSwitch:
    """Tests for is_switch function."""

    @pytest.mark.parametrize(
        "token",
        ["/A", "/b", "/C", "/L", "/N", "/off", "/OFFLINE", "/T", "/U", "/W", "/?", "/LB50", "/5"],
    )
    def test_switches(self, token: str) -> None:
        """Known switches are recognized in any case."""
        assert is_switch(token)

    @pytest.mark.parametrize(
        "token",
        ["a.txt", "/tmp/a.txt", "/home", "/X", "-n", "C:\\a", "/a/b"],
    )
    def test_not_switches(self, token: str) -> None:
        """Files, POSIX paths and unknown letters are file arguments."""
        assert not is_switch(token)

    def test_malformed_counts_are_switches(self) -> None:
        """'/LB' and '/<digit>' forms are switches even if malformed."""
        assert is_switch("/LBx")
        assert is_switch("/5x")


class TestSplitArguments:
    """Tests for split_arguments function."""

    def test_keeps_order(self) -> None:
        """Files and switches are separated, order preserved."""
        files, switches = split_arguments(["/N", "a.txt", "/C", "/tmp/b.txt"])
        assert files == ["a.txt", "/tmp/b.txt"]
        assert switches == ["/N", "/C"]

    def test_empty(self) -> None:
        """No tokens, nothing to split."""
        assert split_arguments([]) == ([], [])


class TestApplySwitches:
    """Tests for apply_switches function."""

    def test_flags(self) -> None:
        """Each flag switch turns its option on."""
        options = apply_switches(CompareOptions(), ["/A", "/b", "/N", "/OFFLINE", "/?"])
        assert options.abbreviate
        assert options.binary
        assert options.line_numbers
        assert options.offline
        assert options.show_help
        assert not options.ignore_case

    def test_counts(self) -> None:
        """/LBn and /nnnn set the line counts."""
        options = apply_switches(CompareOptions(), ["/LB20", "/5"])
        assert options.buffer_lines == 20
        assert options.resync_lines == 5

    def test_original_untouched(self) -> None:
        """A new options object is returned."""
        original = CompareOptions()
        apply_switches(original, ["/C"])
        assert not original.ignore_case

    @pytest.mark.parametrize("token", ["/LB", "/LBx", "/LB0", "/0", "/5x", "/Q"])
    def test_malformed(self, token: str) -> None:
        """Bad counts and unknown switches raise SwitchError."""
        with pytest.raises(SwitchError) as exc_info:
            apply_switches(CompareOptions(), [token])
        assert exc_info.value.token == token
