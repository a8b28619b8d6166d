import os

import pytest

from modelhelper import project
from modelhelper.project import (
    PROJECT_CONFIG_FILE_NAME,
    PROJECT_ROOT_FOLDER_NAME,
    ProjectConfigService,
    create_dir,
    default_dir,
    default_location,
    file_exists,
    merge_string,
)


def test_file_exists_for_file_dir_and_missing(tmp_path):
    target = tmp_path / "config.yaml"
    target.write_text("a: 1\n")
    assert file_exists(target) is True
    assert file_exists(tmp_path) is False
    assert file_exists(tmp_path / "missing.yaml") is False
    assert file_exists("") is False


def test_merge_string_prefers_non_empty_target():
    assert merge_string("current", "target") == "target"
    assert merge_string("current", "") == "current"


def test_default_dir_and_location(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cwd = os.getcwd()
    assert default_dir() == os.path.join(cwd, PROJECT_ROOT_FOLDER_NAME)
    assert default_location() == os.path.join(
        cwd, PROJECT_ROOT_FOLDER_NAME, f"{PROJECT_CONFIG_FILE_NAME}.yaml"
    )


def test_create_dir_twice_raises(tmp_path):
    target = tmp_path / "made"
    create_dir(str(target))
    assert target.is_dir()
    with pytest.raises(FileExistsError):
        create_dir(str(target))


def test_save_then_load_round_trip(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    service = ProjectConfigService()
    data = {"name": "demo", "options": {"lang": "cs"}}
    service.save(data)
    assert file_exists(default_location())
    assert service.load() == data


def test_save_overwrites_existing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    service = ProjectConfigService()
    service.save({"name": "first"})
    service.save({"name": "second"})
    assert service.load() == {"name": "second"}


def test_load_without_file_gives_none(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert ProjectConfigService().load() is None
    assert ProjectConfigService().load_from_file(tmp_path / "nothing.yaml") is None


def test_load_from_file_invalid_yaml_raises(tmp_path):
    broken = tmp_path / "broken.yaml"
    broken.write_text("key: [unclosed\n")
    with pytest.raises(ValueError):
        ProjectConfigService().load_from_file(broken)


def test_exists_uses_service_path(tmp_path):
    target = tmp_path / "p.yaml"
    target.write_text("name: x\n")
    assert ProjectConfigService(target).exists() is True
    assert ProjectConfigService(tmp_path).exists() is False
    assert ProjectConfigService().exists() is False


def test_base_path_and_template_path(tmp_path, monkeypatch):
    (tmp_path / "a" / PROJECT_ROOT_FOLDER_NAME).mkdir(parents=True)
    inner = tmp_path / "a" / "b" / "c"
    inner.mkdir(parents=True)
    monkeypatch.chdir(inner)
    expected = os.path.dirname(os.path.dirname(os.getcwd()))
    service = ProjectConfigService()
    assert service.base_path() == expected
    assert service.template_path() == os.path.join(
        expected, PROJECT_ROOT_FOLDER_NAME, "templates"
    )


def test_find_related_projects_nearest_is_last(tmp_path):
    base = tmp_path / "x"
    (base / PROJECT_ROOT_FOLDER_NAME).mkdir(parents=True)
    start = base / "y"
    start.mkdir()
    real_base = os.path.realpath(base)
    result = ProjectConfigService().find_related_projects(os.path.realpath(start))
    assert result[-1] == os.path.join(real_base, PROJECT_ROOT_FOLDER_NAME, "project.yaml")


def test_find_related_projects_inside_project_folder(tmp_path):
    base = tmp_path / "x"
    inner = base / PROJECT_ROOT_FOLDER_NAME / "inner"
    inner.mkdir(parents=True)
    expected = os.path.join(os.path.realpath(base), PROJECT_ROOT_FOLDER_NAME, "project.yaml")
    result = ProjectConfigService().find_related_projects(os.path.realpath(inner))
    assert result[-1] == expected
    assert result.count(expected) == 1


def test_find_nearest_project_dir_in_current(tmp_path, monkeypatch):
    (tmp_path / PROJECT_ROOT_FOLDER_NAME).mkdir()
    monkeypatch.chdir(tmp_path)
    assert ProjectConfigService().find_nearest_project_dir() == os.path.join(
        PROJECT_ROOT_FOLDER_NAME, "project.yaml"
    )


def test_find_nearest_project_dir_one_level_up(tmp_path, monkeypatch):
    (tmp_path / PROJECT_ROOT_FOLDER_NAME).mkdir()
    child = tmp_path / "child"
    child.mkdir()
    monkeypatch.chdir(child)
    assert ProjectConfigService().find_nearest_project_dir() == os.path.join(
        os.pardir, PROJECT_ROOT_FOLDER_NAME, "project.yaml"
    )


def test_module_constants_agree_with_location(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert os.path.basename(project.default_location()) == "project.yaml"