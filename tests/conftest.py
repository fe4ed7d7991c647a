# tests/conftest.py
import pytest

from fakelang.config.loader import reset_config_cache
from fakelang.core.phonetics import PhoneticConverter

CMU_SAMPLE = (
    "CAT  K AE1 T\n"
    "DOG  D AO1 G\n"
    "BIRD  B ER1 D\n"
    "STOP  S T AA1 P\n"
    "MASK  M AE1 S K\n"
    "ABOUT  AH0 . B AW1 T\n"
)


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keeps config, logs and default data dirs inside the test's temp directory."""
    home = tmp_path / "home"
    monkeypatch.setenv("FAKELANG_HOME", str(home))
    reset_config_cache()
    yield home
    reset_config_cache()


@pytest.fixture
def plain_converter():
    # Sound table without ASCII keys, so ASCII candidates pass through untouched
    return PhoneticConverter(sounds=[("ʔ", "")])


@pytest.fixture
def data_dir(tmp_path):
    path = tmp_path / "data"
    path.mkdir()
    (path / "English_DictionarySorted.txt").write_text("cat\t120\ndog\t80\nbird\t40\n", encoding="utf-8")
    (path / "English_IPASyllables.txt").write_text(CMU_SAMPLE, encoding="utf-8")
    return path
