from pathlib import Path

import pytest

from short_answer_grader.config import (
    GraderConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
)


def test_config_from_dict_ignores_unknown_keys():
    config = config_from_dict({"typo_max_distance": 2, "unknown": True})
    assert config.typo_max_distance == 2
    assert config.dictionary_filename == "dictionary.txt"
    assert config_from_dict(None) == GraderConfig()


def test_config_from_dict_accepts_single_search_dir():
    config = config_from_dict({"dictionary_search_dirs": "words"})
    assert config.dictionary_search_dirs == ["words"]


def test_config_from_yaml(tmp_path: Path):
    path = tmp_path / "grader.yaml"
    path.write_text(
        "dictionary_path: words.txt\nsystem_word_list: null\n", encoding="utf-8"
    )
    config = load_config(path)
    assert config.dictionary_path == "words.txt"
    assert config.system_word_list is None
    assert load_config(None) == GraderConfig()


def test_config_from_yaml_rejects_non_mapping(tmp_path: Path):
    path = tmp_path / "grader.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError):
        config_from_yaml(path)
