import pytest

from cukesuite.fs import FS


def test_mapping_normal_open():
    fs = FS({"testfile": b"hello worlds"})
    with fs.open("testfile") as handle:
        assert handle.read() == b"hello worlds"


def test_mapping_text_contents_are_encoded():
    fs = FS({"testfile": "hello worlds"})
    with fs.open("testfile") as handle:
        assert handle.read() == b"hello worlds"


def test_mapping_file_not_found():
    with pytest.raises(FileNotFoundError) as info:
        FS({}).open("testfile")
    assert str(info.value) == "open testfile: file does not exist"


def test_mapping_directory_is_not_a_file():
    fs = FS({"features/a.feature": b"Feature: a"})
    with pytest.raises(IsADirectoryError):
        fs.open("features")


def test_nil_fs_falls_back_on_os(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError) as info:
        FS().open("testfile")
    assert str(info.value) == "open testfile: no such file or directory"


def test_os_normal_open(tmp_path):
    base = tmp_path / "godogs"
    (base / "a").mkdir(parents=True)
    (base / "testfile").write_bytes(b"hello worlds")
    with FS().open(str(base / "testfile")) as handle:
        assert handle.read() == b"hello worlds"


def test_os_missing_file_reports_full_path(tmp_path):
    base = tmp_path / "godogs"
    (base / "a").mkdir(parents=True)
    target = str(base / "testfile")
    with pytest.raises(FileNotFoundError) as info:
        FS().open(target)
    assert str(info.value) == f"open {target}: no such file or directory"


class _Opener:
    def __init__(self):
        self.opened = []

    def open(self, name):
        self.opened.append(name)
        import io

        return io.BytesIO(name.encode())


def test_custom_file_system_is_used():
    opener = _Opener()
    with FS(opener).open("x.feature") as handle:
        assert handle.read() == b"x.feature"
    assert opener.opened == ["x.feature"]