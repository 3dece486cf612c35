# ABOUTME: Tests for main.py and the browser project table
# ABOUTME: Verifies argument handling, environment overrides and the retry loop

import os
from unittest.mock import patch

import pytest

import main
from storefront_e2e.constants import (
    PROJECTS,
    BrowserProject,
    get_project,
    retries_for,
    workers_for,
)


def test_parse_args_splits_pytest_args():
    args, extra = main.parse_args(["--country", "GB", "--project", "webkit", "-k", "pdp"])

    assert args.country == "GB"
    assert args.projects == ["webkit"]
    assert extra == ["-k", "pdp"]


def test_export_overrides():
    args, _ = main.parse_args(
        ["--country", "GB", "--branch", "staging", "--deploy-preview-url", "https://x.example.com", "--headless"]
    )

    main.export_overrides(args)

    assert os.environ["COUNTRY"] == "GB"
    assert os.environ["BRANCH"] == "staging"
    assert os.environ["DEPLOY_PREVIEW_URL"] == "https://x.example.com"
    assert os.environ["HEADLESS"] == "true"


def test_export_overrides_leaves_unset_values():
    args, _ = main.parse_args([])

    main.export_overrides(args)

    assert "COUNTRY" not in os.environ
    assert "HEADLESS" not in os.environ


def test_run_project_retries_only_failures():
    project = get_project("chromium")
    codes = iter([pytest.ExitCode.TESTS_FAILED, pytest.ExitCode.OK])

    with patch.object(main, "run_pytest", side_effect=lambda args: next(codes)) as run:
        exit_code = main.run_project(project, ["-x"], retries=2)

    assert exit_code == pytest.ExitCode.OK
    assert run.call_count == 2
    assert "--last-failed" in run.call_args_list[1].args[0]
    assert "--last-failed" not in run.call_args_list[0].args[0]


def test_run_project_gives_up_after_retries():
    project = get_project("webkit")

    with patch.object(main, "run_pytest", return_value=pytest.ExitCode.TESTS_FAILED) as run:
        exit_code = main.run_project(project, [], retries=2)

    assert exit_code == pytest.ExitCode.TESTS_FAILED
    assert run.call_count == 3


def test_run_project_does_not_retry_other_errors():
    with patch.object(main, "run_pytest", return_value=pytest.ExitCode.USAGE_ERROR) as run:
        main.run_project(get_project("chromium"), [], retries=2)

    assert run.call_count == 1


def test_main_runs_selected_projects(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with patch.object(main, "run_pytest", return_value=0) as run:
        exit_code = main.main(["--project", "Mobile Safari", "--country", "GB"])

    assert exit_code == 0
    assert run.call_count == 1
    assert run.call_args.args[0][:4] == ["--browser", "webkit", "--device", "iPhone 12"]


def test_main_list_projects(capsys):
    with patch.object(main, "run_pytest") as run:
        assert main.main(["--list-projects"]) == 0

    run.assert_not_called()
    assert "Mobile Chrome" in capsys.readouterr().out


def test_project_table():
    assert [p.name for p in PROJECTS] == ["chromium", "webkit", "Mobile Chrome", "Mobile Safari"]
    assert get_project("mobile chrome").device == "Pixel 5"
    assert BrowserProject("firefox", "firefox").pytest_args() == ["--browser", "firefox"]


def test_get_project_unknown():
    with pytest.raises(ValueError, match="Unknown project"):
        get_project("netscape")


def test_retries_for():
    assert retries_for(True) == 2
    assert retries_for(False) == 0


def test_run_project_runs_local_workers_in_parallel():
    with patch.object(main, "run_pytest", return_value=0) as run:
        main.run_project(get_project("chromium"), [], retries=0, workers=workers_for(False))

    args = run.call_args.args[0]
    assert args[args.index("-n") + 1] == "auto"


def test_main_uses_single_worker_on_ci(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CI", "true")
    codes = iter([pytest.ExitCode.TESTS_FAILED, pytest.ExitCode.OK])

    with patch.object(main, "run_pytest", side_effect=lambda args: next(codes)) as run:
        assert main.main(["--project", "chromium"]) == pytest.ExitCode.OK

    first, retry = (c.args[0] for c in run.call_args_list)
    assert first[first.index("-n") + 1] == "1"
    assert "--tracing" not in first
    assert retry[retry.index("--tracing") + 1] == "retain-on-failure"


def test_workers_for():
    assert workers_for(True) == "1"
    assert workers_for(False) == "auto"
