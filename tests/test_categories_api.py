from app.categories.management.data import CATEGORY_SLUGS


class TestCategories:
    def test_tree_covers_taxonomy_with_active_counts(self, client):
        response = client.get("/categories/")
        data = response.get_json()

        assert response.status_code == 200
        assert [c["slug"] for c in data] == CATEGORY_SLUGS

        by_slug = {c["slug"]: c for c in data}
        assert by_slug["laptops"]["count"] == 1
        assert by_slug["peripherals"]["count"] == 2
        assert by_slug["networking-equipment"]["count"] == 0

        subcategories = {
            s["name"]: s["count"] for s in by_slug["peripherals"]["subcategories"]
        }
        assert subcategories["Monitors"] == 1
        assert subcategories["Mice"] == 1
        assert subcategories["Webcams"] == 0

    def test_single_category(self, client):
        response = client.get("/categories/computer-accessories")

        assert response.status_code == 200
        assert response.get_json()["name"] == "Computer Accessories"

    def test_unknown_category(self, client):
        response = client.get("/categories/furniture")

        assert response.status_code == 404


class TestCommands:
    def test_list_categories(self, app):
        result = app.test_cli_runner().invoke(args=["list-categories"])

        assert result.exit_code == 0
        assert "Laptops (1 active)" in result.output
        assert "Monitors (1)" in result.output

    def test_export_catalog(self, app, tmp_path):
        path = tmp_path / "catalog.json"

        result = app.test_cli_runner().invoke(args=["export-catalog", str(path)])

        assert result.exit_code == 0
        assert path.exists()
        assert "Exported 7 products" in result.output
