import json
import unittest
from unittest.mock import Mock, patch

from click.testing import CliRunner

import satucommit.cli as cli
from satucommit.vcs.git_client import GitError, StagedChange


class DummyGitClient:
    def __init__(self, staged=(), is_repo=True, commit_ok=True):
        self.repo_root = "/repo"
        self.staged = [StagedChange.from_line(line) for line in staged]
        self.is_repo = is_repo
        self.commit_ok = commit_ok
        self.commit_called = []
        self.error = None

    def is_repository(self):
        return self.is_repo

    def get_staged_changes(self):
        if self.error is not None:
            raise self.error
        return self.staged

    def commit(self, message):
        self.commit_called.append(message)
        return self.commit_ok


class CLITestCase(unittest.TestCase):
    def invoke(self, dummy, args, **kwargs):
        runner = CliRunner()
        with patch.object(cli, "GitClient", return_value=dummy):
            return runner.invoke(cli.main, args, **kwargs)


class TestGenerate(CLITestCase):
    def test_not_a_repository(self) -> None:
        result = self.invoke(DummyGitClient(is_repo=False), ["generate"])
        self.assertEqual(result.exit_code, cli.EXIT_NO_REPO)
        self.assertIn("Not a git repository", result.output)

    def test_no_staged_changes(self) -> None:
        dummy = DummyGitClient()
        result = self.invoke(dummy, ["generate"])
        self.assertEqual(result.exit_code, cli.EXIT_NO_CHANGES)
        self.assertIn("No staged changes found", result.output)
        self.assertIn("git add .", result.output)
        self.assertEqual(dummy.commit_called, [])

    def test_listing_failure_counts_as_nothing_staged(self) -> None:
        dummy = DummyGitClient(staged=["M\ta.py"])
        dummy.error = GitError("fatal: bad index")
        result = self.invoke(dummy, ["generate"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("No staged changes found", result.output)

    def test_dry_run_generated_message(self) -> None:
        dummy = DummyGitClient(staged=["A\tsrc/core/foo.js", "M\tdocs/readme.md"])
        result = self.invoke(dummy, ["generate", "-d", "update stuff", "--dry-run"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("📝 docs(docs): update stuff", result.output)
        self.assertIn("Added: 1", result.output)
        self.assertIn("Modified: 1", result.output)
        self.assertIn("Dry run mode", result.output)
        self.assertEqual(dummy.commit_called, [])

    def test_default_description(self) -> None:
        dummy = DummyGitClient(staged=["M\tsrc/main.py"])
        result = self.invoke(dummy, ["generate"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(dummy.commit_called, ["🐛 fix: update project files"])
        self.assertIn("Commit successful", result.output)

    def test_explicit_message_is_committed(self) -> None:
        dummy = DummyGitClient(staged=["M\tapi/v1.py"])
        result = self.invoke(
            dummy,
            [
                "generate",
                "--type", "feat",
                "--scope", "api",
                "--description", "drop v1 endpoint",
                "--body", "Use v2 instead.",
                "--footer", "BREAKING CHANGE: v1 is gone",
                "--breaking",
            ],
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(
            dummy.commit_called,
            ["✨ feat(api)!: drop v1 endpoint\n\nUse v2 instead.\n\nBREAKING CHANGE: v1 is gone"],
        )

    def test_type_without_description_is_generated(self) -> None:
        dummy = DummyGitClient(staged=["D\tlegacy.py"])
        result = self.invoke(dummy, ["generate", "--type", "docs"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(dummy.commit_called, ["➖ remove: update project files"])

    def test_unknown_type_warns(self) -> None:
        dummy = DummyGitClient(staged=["M\ta.py"])
        result = self.invoke(dummy, ["generate", "-t", "banana", "-d", "ripen", "--dry-run"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Unknown commit type 'banana'", result.output)
        self.assertIn("✨ banana: ripen", result.output)

    def test_commit_failure(self) -> None:
        dummy = DummyGitClient(staged=["M\ta.py"], commit_ok=False)
        result = self.invoke(dummy, ["generate"])
        self.assertEqual(result.exit_code, cli.EXIT_COMMIT_FAILURE)
        self.assertIn("Commit failed", result.output)

    def test_group_dry_run(self) -> None:
        dummy = DummyGitClient(staged=["A\tsrc/app.py", "M\ttests/test_app.py", "M\tREADME.md"])
        result = self.invoke(dummy, ["generate", "--group", "--dry-run"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Generated 3 commit messages", result.output)
        self.assertIn("✨ feat: add 1 new file", result.output)
        self.assertIn("📝 docs: update 1 documentation file", result.output)
        self.assertIn("✅ test: add 1 test file", result.output)
        self.assertLess(result.output.index("feat: add"), result.output.index("docs: update"))
        self.assertNotIn("manual execution", result.output)
        self.assertEqual(dummy.commit_called, [])

    def test_group_requires_manual_commits(self) -> None:
        dummy = DummyGitClient(staged=["A\tsrc/app.py"])
        result = self.invoke(dummy, ["generate", "-g", "-s", "core"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("✨ feat(core): add 1 new file", result.output)
        self.assertIn("Grouped commits require manual execution", result.output)
        self.assertEqual(dummy.commit_called, [])

    def test_unexpected_error(self) -> None:
        dummy = DummyGitClient(staged=["M\ta.py"])
        dummy.error = RuntimeError("disk on fire")
        result = self.invoke(dummy, ["generate"])
        self.assertEqual(result.exit_code, cli.EXIT_GENERIC_ERROR)
        self.assertIn("disk on fire", result.output)


class TestQuick(CLITestCase):
    def test_quick_commit(self) -> None:
        dummy = DummyGitClient(staged=["A\tauth/login.py"])
        result = self.invoke(dummy, ["quick", "-d", "add login"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(dummy.commit_called, ["✨ feat(auth): add login"])

    def test_quick_alias_dry_run(self) -> None:
        dummy = DummyGitClient(staged=["A\tauth/login.py"])
        result = self.invoke(dummy, ["q", "--dry-run"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("✨ feat(auth): update project files", result.output)
        self.assertEqual(dummy.commit_called, [])


class TestListings(CLITestCase):
    def test_types(self) -> None:
        result = self.invoke(DummyGitClient(), ["types"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("✨ feat", result.output)
        self.assertIn("A new feature", result.output)
        self.assertIn("Adding dependencies", result.output)

    def test_scopes(self) -> None:
        result = self.invoke(DummyGitClient(), ["scopes"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("• core", result.output)
        self.assertIn("• webhooks", result.output)

    def test_version(self) -> None:
        result = self.invoke(DummyGitClient(), ["--version"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("satucommit", result.output)


def test_scopes_include_configured_extras(isolate_user_config):
    isolate_user_config.mkdir(parents=True)
    (isolate_user_config / "config.json").write_text(json.dumps({"extra_scopes": ["billing"]}), encoding="utf-8")
    result = CliRunner().invoke(cli.main, ["scopes"])
    assert result.exit_code == 0
    assert "• billing" in result.output


def test_configured_default_description(isolate_user_config):
    isolate_user_config.mkdir(parents=True)
    (isolate_user_config / "config.json").write_text(
        json.dumps({"default_description": "sync work"}), encoding="utf-8"
    )
    dummy = DummyGitClient(staged=["M\tsrc/main.py"])
    with patch.object(cli, "GitClient", return_value=dummy):
        result = CliRunner().invoke(cli.main, ["quick"])
    assert result.exit_code == 0, result.output
    assert dummy.commit_called == ["🐛 fix: sync work"]


def test_invalid_config_exits_with_error(isolate_user_config):
    isolate_user_config.mkdir(parents=True)
    (isolate_user_config / "config.json").write_text("{oops", encoding="utf-8")
    dummy = DummyGitClient(staged=["M\tsrc/main.py"])
    with patch.object(cli, "GitClient", return_value=dummy):
        for args in (["scopes"], ["generate"], ["quick"], ["interactive"]):
            result = CliRunner().invoke(cli.main, args)
            assert result.exit_code == cli.EXIT_CONFIG_ERROR, args
            assert "Configuration error" in result.output
    assert dummy.commit_called == []


def test_types_does_not_read_config(isolate_user_config):
    isolate_user_config.mkdir(parents=True)
    (isolate_user_config / "config.json").write_text("{oops", encoding="utf-8")
    result = CliRunner().invoke(cli.main, ["types"])
    assert result.exit_code == 0, result.output
    assert "A new feature" in result.output
    assert "Configuration error" not in result.output


def test_listing_commands_report_unexpected_errors():
    with patch.object(cli, "scope_vocabulary", side_effect=RuntimeError("bad scopes")):
        result = CliRunner().invoke(cli.main, ["scopes"])
    assert result.exit_code == cli.EXIT_GENERIC_ERROR
    assert "Error: bad scopes" in result.output

    broken_types = Mock(items=Mock(side_effect=RuntimeError("bad markers")))
    with patch.object(cli, "COMMIT_TYPES", broken_types):
        result = CliRunner().invoke(cli.main, ["types"])
    assert result.exit_code == cli.EXIT_GENERIC_ERROR
    assert "Error: bad markers" in result.output


if __name__ == "__main__":
    unittest.main()
