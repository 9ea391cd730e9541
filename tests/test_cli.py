# tests/test_cli.py - drive the CLI through an in-memory console
import io
import json

import pytest
from rich.console import Console

from word_suggester.cli import CLI, main
from word_suggester.utils.config_manager import Config


@pytest.fixture
def cfg(tmp_path):
    return Config(str(tmp_path / "config.json"))


def run_cli(cfg, answers):
    out = io.StringIO()
    cli = CLI(cfg, console=Console(file=out, width=120), stream=io.StringIO("\n".join(answers) + "\n"))
    cli.run()
    return cli, out.getvalue()


def test_prefix_search(cfg):
    cli, out = run_cli(cfg, ["4", "apple:5 app:2", "apt:1", "bat:3", "1", "ap", "3"])
    assert len(cli.suggester) == 4
    assert 'Suggestions for "ap"' in out
    table = out[out.index('Suggestions for "ap"'):]
    assert table.index("apple") < table.index("apt")
    assert "bat" not in table
    assert not cli.running


def test_invalid_entries_are_reentered(cfg):
    cli, out = run_cli(cfg, ["0", "2", "b4d", "cat", "dog:2", "3"])
    assert "Invalid input" in out
    assert "Invalid word" in out
    assert cli.suggester.build_dictionary_snapshot(sort=True) == [("cat", 0), ("dog", 2)]


def test_spell_correction_fallback(cfg):
    _, out = run_cli(cfg, ["2", "apple:5", "bat:3", "1", "aple", "1", "qqqqqq", "3"])
    assert "Trying spell correction" in out
    assert "Did you mean" in out
    assert "No similar words found." in out


def test_invalid_prefix_and_choice(cfg):
    _, out = run_cli(cfg, ["1", "apple", "1", "ap1", "9", "3"])
    assert "Invalid prefix." in out
    assert "Invalid choice." in out


def test_show_all(cfg):
    _, out = run_cli(cfg, ["3", "cherry", "apple", "banana", "2", "3"])
    assert out.index("apple") < out.index("banana") < out.index("cherry")


def test_end_of_input_exits(cfg):
    cli, out = run_cli(cfg, ["1", "apple"])
    assert not cli.running
    assert "Exiting" in out


def test_main_missing_word_file(tmp_path):
    rc = main(["--words", str(tmp_path / "missing.txt"), "--config", str(tmp_path / "c.json")])
    assert rc == 1


def test_load_file(cfg, tmp_path):
    words = tmp_path / "words.txt"
    words.write_text("apple:5 app:2\nb4d bat:3\n", encoding="utf8")
    cli = CLI(cfg, console=Console(file=io.StringIO()))
    assert cli.load_file(str(words)) == 3


def test_blank_lines_do_not_end_session(cfg):
    cli, out = run_cli(cfg, ["", "1", "", "apple", "", "1", "ap", "3"])
    assert len(cli.suggester) == 1
    assert "Invalid choice." in out
    assert 'Suggestions for "ap"' in out


def test_search_renders_prefix_and_fallback(cfg):
    out = io.StringIO()
    cli = CLI(cfg, console=Console(file=out, width=120))
    cli.suggester.load([("apple", 5), ("bat", 3)])
    cli.search("ba")
    cli.search("aple")
    text = out.getvalue()
    assert 'Suggestions for "ba"' in text
    assert 'No words with prefix "aple"' in text
    assert "Did you mean" in text


@pytest.mark.parametrize(
    "args,config",
    [
        (["--log-level", "loud"], {}),
        ([], {"max_suggestions": 0}),
    ],
)
def test_main_bad_settings_exit_cleanly(tmp_path, args, config):
    path = tmp_path / "c.json"
    path.write_text(json.dumps(config), encoding="utf8")
    assert main(args + ["--config", str(path)]) == 2


def test_main_show_config(tmp_path, capsys):
    assert main(["--show-config", "--config", str(tmp_path / "c.json")]) == 0
    out = capsys.readouterr().out
    assert "max_suggestions" in out
    assert "log_level" in out
