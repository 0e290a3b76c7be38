import pytest

from minishell import diagnostics
from minishell.models import Command, ShellState


@pytest.mark.parametrize(
    "func, message",
    [
        (diagnostics.read_fail, "Invalid read\n"),
        (diagnostics.malloc_fail, "Malloc error\n"),
        (diagnostics.creation_fail, "Cannot create file\n"),
        (diagnostics.pipe_fail, "Pipe failure\n"),
        (diagnostics.fork_fail, "Fork failure\n"),
        (diagnostics.waitpid_fail, "Waitpid fail\n"),
        (diagnostics.dup2_fail, "Dup2_failure\n"),
    ],
)
def test_fixed_messages_go_to_stderr(capfd, func, message):
    func()
    out, err = capfd.readouterr()
    assert err == message
    assert out == ""


def test_export_fail_quotes_name(capfd):
    diagnostics.export_fail("1abc")
    assert capfd.readouterr().err == "export: '1abc': not a valid identifier\n"


def test_ctrld_actioned_writes_warning_to_stdout(capfd):
    diagnostics.ctrld_actioned("EOF")
    out, err = capfd.readouterr()
    assert out == "Warning: here-document delimitedby end-of-file (wanted `EOF')\n"
    assert err == ""


def test_permission_fail_with_and_without_path(capfd):
    diagnostics.permission_fail("secret.txt")
    diagnostics.permission_fail(None)
    assert capfd.readouterr().err == "secret.txt: Permission denied\n: Permission denied\n"


def test_perm_or_file_missing_for_missing_file(capfd, tmp_path):
    path = str(tmp_path / "nope")
    diagnostics.perm_or_file_missing(path)
    assert capfd.readouterr().err == path + ": No such file or directory\n"


def test_perm_or_file_missing_for_readable_file(capfd, tmp_path):
    target = tmp_path / "present"
    target.write_text("x")
    diagnostics.perm_or_file_missing(str(target))
    assert capfd.readouterr().err.endswith(": No such file or directory\n")


def test_infiles_unreadable(tmp_path):
    present = tmp_path / "in.txt"
    present.write_text("x")
    assert diagnostics.infiles_unreadable(Command(infile_tab=[str(present)])) is False
    assert diagnostics.infiles_unreadable(Command()) is False
    missing = Command(infile_tab=[str(present), str(tmp_path / "missing")])
    assert diagnostics.infiles_unreadable(missing) is True


def test_report_missing_commands(capfd):
    state = ShellState(
        commands=[
            Command(cmd=None, cmd_str="foo"),
            Command(cmd="/bin/ls", cmd_str="ls"),
            Command(cmd=None, cmd_str="fake_fdp"),
            Command(cmd=None, cmd_str=None),
        ]
    )
    reported = diagnostics.report_missing_commands(state)
    assert reported == ["foo"]
    assert capfd.readouterr().err == "minishell: foo: command not found\n"
    assert state.status == 127
    assert state.status_check is True


def test_report_skips_command_with_unreadable_infile(capfd, tmp_path):
    state = ShellState(
        commands=[Command(cmd=None, cmd_str="foo", infile_tab=[str(tmp_path / "missing")])]
    )
    assert diagnostics.report_missing_commands(state) == []
    assert capfd.readouterr().err == ""
    assert state.status == 0
    assert state.status_check is False