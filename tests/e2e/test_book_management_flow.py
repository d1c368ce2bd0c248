"""
书籍管理端到端测试
测试完整的书籍管理工作流程
"""
import pytest


@pytest.mark.e2e
class TestBookManagementFlow:
    """书籍管理端到端测试类"""

    def test_complete_book_lifecycle(self, client):
        """测试完整的书籍生命周期"""
        # 1. 创建书籍
        create_response = client.post("/books", json={"name": "API Design Patterns"})
        assert create_response.status_code == 201
        book_id = create_response.json()["id"]
        assert book_id == 1

        # 2. 验证书籍创建成功
        get_response = client.get(f"/books/{book_id}")
        assert get_response.status_code == 200
        book = get_response.json()
        assert book["id"] == 1
        assert book["name"] == "API Design Patterns"

        # 3. 整体更新
        update_response = client.put(
            f"/books/{book_id}",
            json={"name": "API Design Patterns", "author": "JJ Geewax", "publisher": "Manning"},
        )
        assert update_response.status_code == 204
        book = client.get(f"/books/{book_id}").json()
        assert book["author"] == "JJ Geewax"
        assert book["publisher"] == "Manning"

        # 4. 部分更新
        patch_response = client.patch(
            f"/books/{book_id}",
            json=[
                {"op": "test", "path": "/author", "value": "JJ Geewax"},
                {"op": "add", "path": "/isbn", "value": "9781617295850"},
            ],
        )
        assert patch_response.status_code == 200
        assert patch_response.json()["isbn"] == "9781617295850"

        # 5. 列表中可见
        list_response = client.get("/books", params={"pageSize": 10, "pageToken": 0})
        assert list_response.status_code == 200
        assert [b["id"] for b in list_response.json()] == [book_id]

        # 6. 删除后不可见
        delete_response = client.delete(f"/books/{book_id}")
        assert delete_response.status_code == 200
        assert client.get(f"/books/{book_id}").status_code == 404
        assert client.get("/books").json() == []

    def test_deleted_isbn_can_be_reused(self, client):
        """测试删除后ISBN可以再次使用"""
        data = {"name": "Algorithms to Live By", "isbn": "9781627790369"}

        first = client.post("/books", json=data)
        assert client.post("/books", json=data).status_code == 400
        assert client.delete(f"/books/{first.json()['id']}").status_code == 200

        second = client.post("/books", json=data)
        assert second.status_code == 201
        assert second.json()["id"] != first.json()["id"]
