"""Tests for JSONCatalogSource."""

import json

import pytest

from infrastructure.catalog import JSONCatalogSource


def listing(property_id, **extra):
    data = {"id": property_id, "type": "house", "listingType": "sale"}
    data.update(extra)
    return data


def write_catalog(path, document):
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


class TestJSONCatalogSource:
    """Test loading the catalog document."""

    @pytest.mark.asyncio
    async def test_loads_both_collections(self, tmp_path):
        path = write_catalog(
            tmp_path / "catalog.json",
            {
                "properties": [listing("a", isPremium=True), listing("b")],
                "off_market": [listing("c", isPremium=True)],
            },
        )
        source = JSONCatalogSource(path)

        assert [p.id for p in await source.list_properties()] == ["a", "b"]
        assert [p.id for p in await source.list_properties(off_market=True)] == ["c"]
        assert [p.id for p in await source.list_all_properties()] == ["a", "b", "c"]
        assert [p.id for p in await source.list_featured()] == ["a"]

    @pytest.mark.asyncio
    async def test_get_property(self, tmp_path):
        path = write_catalog(
            tmp_path / "catalog.json",
            {"properties": [listing("a")], "off_market": [listing("c")]},
        )
        source = JSONCatalogSource(path)

        assert (await source.get_property("c")).id == "c"
        assert await source.get_property("zzz") is None

    @pytest.mark.asyncio
    async def test_top_level_list_is_regular_collection(self, tmp_path):
        path = write_catalog(tmp_path / "catalog.json", [listing("a")])
        source = JSONCatalogSource(path)

        assert [p.id for p in await source.list_properties()] == ["a"]
        assert await source.list_properties(off_market=True) == []

    @pytest.mark.asyncio
    async def test_skips_bad_and_duplicate_records(self, tmp_path):
        path = write_catalog(
            tmp_path / "catalog.json",
            {
                "properties": [
                    listing("a"),
                    "not a record",
                    listing("b", type="castle"),
                    listing("a", title="duplicate"),
                    listing("d"),
                ]
            },
        )
        source = JSONCatalogSource(path)

        props = await source.list_properties()

        assert [p.id for p in props] == ["a", "d"]
        assert props[0].title == ""

    @pytest.mark.asyncio
    async def test_missing_file_gives_empty_catalog(self, tmp_path):
        source = JSONCatalogSource(tmp_path / "missing.json")
        assert await source.list_all_properties() == []

    @pytest.mark.asyncio
    async def test_malformed_file_gives_empty_catalog(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("{not json", encoding="utf-8")
        source = JSONCatalogSource(path)
        assert await source.list_properties() == []

    @pytest.mark.asyncio
    async def test_refresh_rereads_document(self, tmp_path):
        path = write_catalog(tmp_path / "catalog.json", {"properties": [listing("a")]})
        source = JSONCatalogSource(path)
        assert len(await source.list_properties()) == 1

        write_catalog(path, {"properties": [listing("a"), listing("b")]})
        assert len(await source.list_properties()) == 1

        await source.refresh()
        assert [p.id for p in await source.list_properties()] == ["a", "b"]

    @pytest.mark.asyncio
    async def test_overflowing_numbers_do_not_break_loading(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(
            '{"properties": ['
            '{"id": "a", "type": "house", "listingType": "sale",'
            ' "features": {"bedrooms": 1e400, "bathrooms": Infinity}},'
            '{"id": "b", "type": "house", "listingType": "sale",'
            ' "price": {"type": "fixed", "amount": -1}}'
            "]}",
            encoding="utf-8",
        )
        source = JSONCatalogSource(path)

        props = await source.list_properties()

        assert [p.id for p in props] == ["a", "b"]
        assert props[0].features.bedrooms is None
        assert props[0].features.bathrooms is None
        assert props[1].price is None
