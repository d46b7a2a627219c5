"""`scl get` 端到端测试：CliRunner + 假执行器，覆盖完整调用链"""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from scltool.cli import main
from scltool.core.config import reset_config
from scltool.utils.logger import reset_logging
from scltool.utils.shell import CommandResult, get_executor, set_executor

TOKEN = "example.com/lib"


class GitFakeExecutor:
    """模拟 git：clone 成功时创建 .git；fail 中的地址 clone 失败"""

    def __init__(self, fail: tuple[str, ...] = ()) -> None:
        self.fail = fail
        self.calls: list[list[str]] = []

    def execute(self, cmd, *, cwd=".", env=None, timeout=None) -> CommandResult:
        self.calls.append(list(cmd))
        if cmd[:2] == ["git", "clone"]:
            if cmd[-2] in self.fail:
                return CommandResult(128, "", "fatal: repository not found")
            (Path(cmd[-1]) / ".git").mkdir(parents=True, exist_ok=True)
        return CommandResult(0, "", "")


def _use_executor(fake: GitFakeExecutor):
    original = get_executor()
    set_executor(fake)
    yield fake
    set_executor(original)


@pytest.fixture()
def executor():
    yield from _use_executor(GitFakeExecutor())


@pytest.fixture()
def failing_executor():
    yield from _use_executor(GitFakeExecutor(fail=("https://example.com/missing",)))


@pytest.fixture(autouse=True)
def _isolate(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("SCL_LOG_LEVEL", raising=False)
    yield
    reset_logging()
    reset_config()


@pytest.fixture()
def scl(tmp_path: Path):
    runner = CliRunner()
    missing_cfg = str(tmp_path / "no-config.yml")

    def invoke(*args: str, config: str = missing_cfg):
        return runner.invoke(main, ["-c", config, *args])

    return invoke


def _write_config(tmp_path: Path, text: str) -> str:
    cfg = tmp_path / "scl.yml"
    cfg.write_text(text)
    return str(cfg)


class TestGetArguments:
    def test_no_tokens_exit_1(self, scl, executor) -> None:
        result = scl("get")
        assert result.exit_code == 1
        assert "At least one dependency is required" in result.output
        assert executor.calls == []

    def test_no_tokens_does_not_read_config(self, scl, executor, tmp_path: Path) -> None:
        cfg = _write_config(tmp_path, "vendor_dir: [unclosed\n")
        result = scl("get", config=cfg)
        assert result.exit_code == 1
        assert "At least one dependency is required" in result.output
        assert "配置文件格式错误" not in result.output

    def test_help(self, scl) -> None:
        result = scl("help", "get")
        assert result.exit_code == 0
        assert "--output-path" in result.output
        assert "--update" in result.output

    def test_help_unknown_command(self, scl) -> None:
        assert scl("help", "nope").exit_code == 1

    def test_version(self, scl) -> None:
        result = scl("--version")
        assert "1.3.1" in result.output


class TestGetScenarios:
    def test_fetch_new(self, scl, executor, tmp_path: Path) -> None:
        vendor = tmp_path / "vendor"
        result = scl("get", "-v", "-o", str(vendor), TOKEN)

        assert result.exit_code == 0
        assert (vendor / "example.com" / "lib" / ".git").is_dir()
        assert executor.calls[0][:4] == [
            "git", "clone", "--recursive", "https://example.com/lib",
        ]
        assert f"{TOKEN} fetched successfully." in result.output
        assert "1 dependencie(s) created, 0 dependencie(s) updated." in result.output

    def test_default_vendor_dir(self, executor, tmp_path: Path) -> None:
        runner = CliRunner()
        with runner.isolated_filesystem(temp_dir=tmp_path) as cwd:
            result = runner.invoke(main, ["-c", "none.yml", "get", TOKEN])
            assert result.exit_code == 0
            assert (Path(cwd) / "vendor" / "example.com" / "lib" / ".git").is_dir()

    def test_second_run_skips(self, scl, executor, tmp_path: Path) -> None:
        vendor = str(tmp_path / "vendor")
        scl("get", "-o", vendor, TOKEN)
        executor.calls.clear()

        result = scl("get", "-v", "-o", vendor, TOKEN)

        assert result.exit_code == 0
        assert executor.calls == []
        assert f"{TOKEN} already present, run with -u to update" in result.output
        assert "0 dependencie(s) created, 0 dependencie(s) updated." in result.output

    def test_update_existing(self, scl, executor, tmp_path: Path) -> None:
        vendor = str(tmp_path / "vendor")
        scl("get", "-o", vendor, TOKEN)
        executor.calls.clear()

        result = scl("get", "-u", "-v", "-o", vendor, TOKEN)

        assert result.exit_code == 0
        assert executor.calls[0] == ["git", "pull"]
        assert not any(c[1] == "clone" for c in executor.calls)
        assert f"{TOKEN} updated successfully" in result.output
        assert "0 dependencie(s) created, 1 dependencie(s) updated." in result.output

    def test_quiet_success_prints_nothing(self, scl, executor, tmp_path: Path) -> None:
        result = scl("get", "-o", str(tmp_path / "vendor"), TOKEN)
        assert result.exit_code == 0
        assert result.output == ""

    def test_vendor_root_not_creatable(self, scl, executor, tmp_path: Path) -> None:
        blocker = tmp_path / "read-only"
        blocker.write_text("")
        result = scl("get", "-o", str(blocker / "vendor"), TOKEN)
        assert result.exit_code == 1
        assert "Can't create path" in result.output
        assert executor.calls == []


class TestGetFailures:
    def test_failure_does_not_change_exit_code(self, scl, failing_executor, tmp_path: Path) -> None:
        result = scl(
            "get", "-v", "-o", str(tmp_path / "vendor"),
            "example.com/missing", "example.com/ok",
        )

        assert result.exit_code == 0
        assert "[example.com/missing] Can't fetch repo:" in result.output
        assert "repository not found" in result.output
        assert "example.com/ok fetched successfully." in result.output
        assert "1 dependencie(s) created, 0 dependencie(s) updated." in result.output

    def test_quiet_failure_prints_only_reporter_line(self, scl, failing_executor, tmp_path: Path) -> None:
        result = scl("get", "-o", str(tmp_path / "vendor"), "example.com/missing")
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert len(lines) == 1
        assert lines[0].startswith("[example.com/missing] Can't fetch repo:")

    def test_unrecognized_remote_without_default_vcs(self, scl, executor, tmp_path: Path) -> None:
        cfg = _write_config(tmp_path, 'default_vcs: ""\n')
        result = scl("get", "-o", str(tmp_path / "vendor"), TOKEN, config=cfg)
        assert result.exit_code == 0
        assert f"[{TOKEN}] Can't create repo:" in result.output
        assert executor.calls == []

    def test_default_vcs_from_config(self, scl, tmp_path: Path) -> None:
        calls: list[list[str]] = []

        class HgFake:
            def execute(self, cmd, *, cwd=".", env=None, timeout=None) -> CommandResult:
                calls.append(list(cmd))
                return CommandResult(0, "", "")

        cfg = _write_config(tmp_path, "default_vcs: hg\n")
        original = get_executor()
        set_executor(HgFake())
        try:
            result = scl("get", "-o", str(tmp_path / "vendor"), TOKEN, config=cfg)
        finally:
            set_executor(original)
        assert result.exit_code == 0
        assert calls[0][:2] == ["hg", "clone"]

    def test_strict_flag(self, scl, failing_executor, tmp_path: Path) -> None:
        result = scl("get", "--strict", "-o", str(tmp_path / "vendor"), "example.com/missing")
        assert result.exit_code == 1

    def test_strict_from_config(self, scl, failing_executor, tmp_path: Path) -> None:
        cfg = _write_config(tmp_path, f"strict: true\nvendor_dir: {tmp_path / 'deps'}\n")

        result = scl("get", "example.com/missing", config=cfg)
        assert result.exit_code == 1
        assert (tmp_path / "deps").is_dir()

        result = scl("get", "--no-strict", "example.com/missing", config=cfg)
        assert result.exit_code == 0

    @pytest.mark.parametrize("text", [
        "command_timeout: -5\n",
        "command_timeout: true\n",
        "log_level: 10\n",
        'strict: "no"\n',
        "default_vcs: cvs\n",
    ])
    def test_bad_config_exit_1(self, scl, executor, tmp_path: Path, text: str) -> None:
        cfg = _write_config(tmp_path, text)
        result = scl("get", TOKEN, config=cfg)
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert text.split(":")[0] in result.output
        assert executor.calls == []
