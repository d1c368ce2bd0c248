"""
JSON Patch应用单元测试
"""
import pytest

from bookstore.exceptions import InvalidPatchError
from bookstore.models.book import Book
from bookstore.repositories.patching import apply_patch, load_patch


@pytest.fixture
def book():
    return Book(name="API Design Patterns", author="JJ Geewax", id=1)


class TestApplyPatch:
    """apply_patch测试类"""

    def test_replace_field(self, book):
        result = apply_patch(book, [{"op": "replace", "path": "/name", "value": "New Name"}])

        assert result == Book(name="New Name", author="JJ Geewax", id=1)
        # 原实体不变
        assert book.name == "API Design Patterns"

    def test_multiple_operations(self, book):
        result = apply_patch(book, [
            {"op": "replace", "path": "/publisher", "value": "Manning"},
            {"op": "remove", "path": "/author"},
            {"op": "test", "path": "/name", "value": "API Design Patterns"},
        ])

        assert result.publisher == "Manning"
        assert result.author is None

    def test_empty_patch_returns_equal_entity(self, book):
        assert apply_patch(book, []) == book

    def test_failed_test_operation(self, book):
        with pytest.raises(InvalidPatchError):
            apply_patch(book, [{"op": "test", "path": "/name", "value": "Other"}])

    def test_unknown_member(self, book):
        with pytest.raises(InvalidPatchError) as exc_info:
            apply_patch(book, [{"op": "add", "path": "/price", "value": 10}])
        assert exc_info.value.path == "/price"

    def test_id_is_immutable(self, book):
        with pytest.raises(InvalidPatchError) as exc_info:
            apply_patch(book, [{"op": "replace", "path": "/id", "value": 2}])
        assert exc_info.value.path == "/id"

    def test_remove_required_field(self, book):
        with pytest.raises(InvalidPatchError) as exc_info:
            apply_patch(book, [{"op": "remove", "path": "/name"}])
        assert exc_info.value.path == "/name"

    def test_wrong_value_type(self, book):
        with pytest.raises(InvalidPatchError):
            apply_patch(book, [{"op": "replace", "path": "/name", "value": {"nested": True}}])

    def test_replace_whole_document(self, book):
        with pytest.raises(InvalidPatchError):
            apply_patch(book, [{"op": "replace", "path": "", "value": "text"}])

    def test_missing_path(self, book):
        with pytest.raises(InvalidPatchError):
            apply_patch(book, [{"op": "remove", "path": "/missing"}])


class TestLoadPatch:
    """补丁文档结构校验测试"""

    @pytest.mark.parametrize("document", [
        {"op": "replace", "path": "/name", "value": "x"},
        "not a patch",
        [{"path": "/name", "value": "x"}],
        [{"op": "explode", "path": "/name"}],
        [{"op": "replace", "value": "x"}],
        ["replace"],
        [1],
    ])
    def test_structurally_invalid(self, document):
        with pytest.raises(InvalidPatchError):
            load_patch(document)

    def test_valid_document(self):
        patch = load_patch([{"op": "replace", "path": "/name", "value": "x"}])
        assert patch.apply({"name": "y"}) == {"name": "x"}

    def test_structural_error_targets_document_root(self):
        with pytest.raises(InvalidPatchError) as exc_info:
            load_patch([{"op": "replace"}])
        assert exc_info.value.path == ""
