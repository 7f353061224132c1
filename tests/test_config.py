"""Tests for configuration loading."""

import pytest

from todo_cli.config import Config, load_config


@pytest.fixture
def conf(tmp_path):
    return tmp_path / "todo.conf"


class TestLoadConfig:
    def test_missing_file_defaults(self, conf):
        config = load_config(conf)
        assert config == Config()
        assert config.todo_file == "todo.json"
        assert config.waiting_context == "WF"

    def test_values(self, conf):
        conf.write_text(
            "# todo-cli settings\n"
            "TODO_FILE = ~/notes/todo.json\n"
            "WAITING_CONTEXT = @later\n"
            "COLOR = never\n"
        )
        config = load_config(conf)
        assert config.todo_file == "~/notes/todo.json"
        assert config.waiting_context == "later"
        assert config.color == "never"

    def test_quoted_value_with_comment(self, conf):
        conf.write_text('todo_file = "my todos.json" # shared\n')
        assert load_config(conf).todo_file == "my todos.json"

    def test_unquoted_inline_comment(self, conf):
        conf.write_text("waiting_context = blocked # parked items\n")
        assert load_config(conf).waiting_context == "blocked"

    def test_invalid_color_ignored(self, conf, caplog):
        conf.write_text("color = rainbow\n")
        config = load_config(conf)
        assert config.color == "auto"
        assert "COLOR" in caplog.text

    def test_unknown_key_warns(self, conf, caplog):
        conf.write_text("editor = vim\n")
        load_config(conf)
        assert "Unknown config key" in caplog.text

    def test_lines_without_equals_skipped(self, conf):
        conf.write_text("just some text\n\ncolor=always\n")
        assert load_config(conf).color == "always"


class TestColorFlag:
    @pytest.mark.parametrize("mode, expected", [("auto", None), ("always", True), ("never", False)])
    def test_color_flag(self, mode, expected):
        assert Config(color=mode).color_flag is expected
