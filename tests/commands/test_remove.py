"""Tests for the remove command."""

import pytest

from slashctl.commands.remove import remove_command
from slashctl.errors import CommandNotFoundLocalError, InvalidOptionsCombinationError


class TestRemoveCommand:
    """Test remove_command."""

    def test_removes_project_command(self, project_commands_dir, capsys):
        project_commands_dir.mkdir(parents=True)
        (project_commands_dir / "history.md").write_text("# History")

        remove_command("history")

        assert not (project_commands_dir / "history.md").exists()
        assert capsys.readouterr().out.strip() == 'Removed command "history"'

    def test_removes_user_command(self, user_commands_dir, project_commands_dir):
        for directory in (user_commands_dir, project_commands_dir):
            directory.mkdir(parents=True)
            (directory / "history.md").write_text("# History")

        remove_command("history", user=True)

        assert not (user_commands_dir / "history.md").exists()
        assert (project_commands_dir / "history.md").exists()

    def test_not_found(self):
        with pytest.raises(CommandNotFoundLocalError) as exc_info:
            remove_command("history")

        assert str(exc_info.value) == 'Command "history" not found in project scope'

    def test_not_found_user_scope(self):
        with pytest.raises(CommandNotFoundLocalError, match="user scope"):
            remove_command("history", user=True)

    def test_project_and_user_conflict(self):
        with pytest.raises(InvalidOptionsCombinationError):
            remove_command("history", project=True, user=True)
