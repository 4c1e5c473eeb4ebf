import json

import pytest

from doxybook.config import (
    Config,
    DoxybookError,
    load_config,
    load_config_data,
    save_config,
)


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "config.json"
    original = Config(base_url="/docs/", use_folders=False, files_filter=[".hpp", ".h"])
    save_config(original, str(path))
    loaded = load_config(str(path), Config())
    assert loaded == original


def test_saved_file_uses_json_keys(tmp_path):
    path = tmp_path / "config.json"
    save_config(Config(file_ext="txt"), str(path))
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["fileExt"] == "txt"
    assert list(data) == sorted(data)
    assert "outputDir" not in data


def test_partial_data_keeps_other_values():
    config = Config(main_page_name="home")
    load_config_data('{"linkLowercase": true}', config)
    assert config.link_lowercase is True
    assert config.main_page_name == "home"


def test_load_returns_same_object():
    config = Config()
    assert load_config_data("{}", config) is config
    assert config == Config()


def test_wrong_type_raises():
    with pytest.raises(DoxybookError, match="useFolders"):
        load_config_data('{"useFolders": "yes"}', Config())


def test_wrong_list_item_type_raises():
    with pytest.raises(DoxybookError, match="filesFilter"):
        load_config_data('{"filesFilter": [1, 2]}', Config())


def test_invalid_json_raises():
    with pytest.raises(DoxybookError):
        load_config_data("{not json", Config())


def test_missing_file_raises(tmp_path):
    with pytest.raises(DoxybookError, match="for reading"):
        load_config(str(tmp_path / "missing.json"), Config())


def test_unwritable_path_raises(tmp_path):
    with pytest.raises(DoxybookError, match="for writing"):
        save_config(Config(), str(tmp_path / "no" / "such" / "dir.json"))


def test_to_dict_round_trip_through_update():
    source = Config(index_in_folders=True, folders_to_generate=["classes"])
    target = Config()
    target.update_from_dict(source.to_dict())
    assert target == source


def test_to_dict_lists_are_copies():
    config = Config(files_filter=[".cpp"])
    data = config.to_dict()
    data["filesFilter"].append(".h")
    assert config.files_filter == [".cpp"]