import pytest

from calamari_msa.domain.exceptions import InvalidArgumentError
from calamari_msa.processor.folder_resolver import resolve_folder


@pytest.fixture
def root(tmp_path):
    root = tmp_path / "projects"
    (root / "p1" / "images").mkdir(parents=True)
    (root / "file.txt").write_text("x", encoding="utf-8")
    (tmp_path / "projects2").mkdir()
    return root


def test_relative_folder(root):
    assert resolve_folder(root, "p1") == root / "p1"
    assert resolve_folder(root, " p1/images/ ") == root / "p1" / "images"


def test_root_itself_allowed(root):
    assert resolve_folder(root, ".") == root


def test_dot_segments_inside_root(root):
    assert resolve_folder(root, "p1/../p1/./images") == root / "p1" / "images"


@pytest.mark.parametrize("folder", ["../../etc", "..", "p1/../../projects2", "../projects2"])
def test_traversal_rejected(root, folder):
    with pytest.raises(InvalidArgumentError, match="not a valid directory"):
        resolve_folder(root, folder)


def test_absolute_path_rejected(root, tmp_path):
    # Существующая папка вне корня
    with pytest.raises(InvalidArgumentError, match="not a valid directory"):
        resolve_folder(root, str(tmp_path / "projects2"))


def test_absolute_system_path_rejected(root):
    with pytest.raises(InvalidArgumentError):
        resolve_folder(root, "/etc")


def test_missing_folder_rejected(root):
    with pytest.raises(InvalidArgumentError, match="not a valid directory"):
        resolve_folder(root, "p2")


def test_file_rejected(root):
    with pytest.raises(InvalidArgumentError, match="not a valid directory"):
        resolve_folder(root, "file.txt")


@pytest.mark.parametrize("folder", [None, "", "   "])
def test_blank_folder(root, folder):
    with pytest.raises(InvalidArgumentError, match="not defined"):
        resolve_folder(root, folder)


def test_error_names_component(root):
    with pytest.raises(InvalidArgumentError) as exc_info:
        resolve_folder(root, "p2", component="ProcessorService")
    assert exc_info.value.component == "ProcessorService"
    assert "Component: ProcessorService" in str(exc_info.value)
