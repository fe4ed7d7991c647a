# tests/test_cli.py
import json

import pytest
from typer.testing import CliRunner

from fakelang import __version__
from fakelang.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_logging(mocker):
    # Keep loguru handlers out of CliRunner's swapped streams
    return mocker.patch("fakelang.cli.setup_logging")


def _write_config(tmp_path, **values):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(values), encoding="utf-8")
    return path


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_encrypt_and_decrypt_with_counter_generator(tmp_path, data_dir):
    config = _write_config(tmp_path, data_dir=str(data_dir), generator="counter")

    encrypted = runner.invoke(app, ["--config", str(config), "encrypt", "Cat dog bird."])
    assert encrypted.exit_code == 0, encrypted.output
    assert encrypted.stdout == "100 101 102.\n"

    decrypted = runner.invoke(app, ["--config", str(config), "decrypt", "100 101 102."])
    assert decrypted.exit_code == 0, decrypted.output
    assert decrypted.stdout == "cat dog bird.\n"


def test_markov_round_trip_through_files(tmp_path, data_dir):
    config = _write_config(tmp_path, data_dir=str(data_dir), cache_dir=str(tmp_path / "cache"), seed=5)
    source = tmp_path / "in.txt"
    source.write_text("Bird, dog & cat!", encoding="utf-8")
    encrypted_path = tmp_path / "out" / "enc.txt"
    decrypted_path = tmp_path / "out" / "dec.txt"

    result = runner.invoke(app, ["--config", str(config), "encrypt", "--input", str(source),
                                 "--output", str(encrypted_path), "--language", "english"])
    assert result.exit_code == 0, result.output
    result = runner.invoke(app, ["--config", str(config), "decrypt", "--input", str(encrypted_path),
                                 "--output", str(decrypted_path)])
    assert result.exit_code == 0, result.output

    assert decrypted_path.read_text(encoding="utf-8") == "bird, dog & cat!"
    assert (tmp_path / "cache" / "English_Graph.json").is_file()


def test_build_dictionary_and_graph(tmp_path, data_dir):
    config = _write_config(tmp_path, data_dir=str(data_dir), seed=1)

    result = runner.invoke(app, ["--config", str(config), "build-dictionary", "--rebuild"])
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "English: 3 entries"

    result = runner.invoke(app, ["--config", str(config), "build-graph"])
    assert result.exit_code == 0, result.output
    assert result.stdout.startswith("English: ")
    assert "vertices" in result.output


def test_missing_word_list_exits_with_error(tmp_path):
    config = _write_config(tmp_path, data_dir=str(tmp_path / "empty"), generator="counter")
    result = runner.invoke(app, ["--config", str(config), "encrypt", "hello"])
    assert result.exit_code == 1


def test_encrypt_needs_input(tmp_path, data_dir):
    config = _write_config(tmp_path, data_dir=str(data_dir), generator="counter")
    result = runner.invoke(app, ["--config", str(config), "encrypt"])
    assert result.exit_code == 1


def test_transcribe(tmp_path, data_dir):
    (data_dir / "English_DictionaryIPA.txt").write_text("cat,kæt\n", encoding="utf-8")
    config = _write_config(tmp_path, data_dir=str(data_dir))
    result = runner.invoke(app, ["--config", str(config), "transcribe", "Cat, dog"])
    assert result.exit_code == 0, result.output
    assert result.stdout == "kæt, dog\n"


def test_init_config_refuses_to_overwrite(tmp_path):
    target = tmp_path / "fresh.json"
    result = runner.invoke(app, ["--config", str(target), "init-config"])
    assert result.exit_code == 0, result.output
    assert json.loads(target.read_text(encoding="utf-8"))["generator"] == "markov"

    result = runner.invoke(app, ["--config", str(target), "init-config"])
    assert result.exit_code == 1
    result = runner.invoke(app, ["--config", str(target), "init-config", "--force"])
    assert result.exit_code == 0
