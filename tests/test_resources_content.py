import json

import pytest
import respx
from httpx import Response
from wordpress_mcp.core.client import WordPressClient
from wordpress_mcp.core.config import SiteConfig
from wordpress_mcp.core.errors import (
    WordPressNotFoundError,
    WordPressParseError,
    WordPressValidationError,
)
from wordpress_mcp.core.resources import BlocksClient, PagesClient, PostsClient

BASE = "https://example.com/wp-json/wp/v2"

INVALID_ID = {
    "code": "rest_post_invalid_id",
    "message": "Invalid post ID.",
    "data": {"status": 404},
}


@pytest.fixture
def config():
    return SiteConfig(
        url="https://example.com", username="user", auth="pass", auth_type="basic"
    )


@pytest.fixture
def posts(config):
    return PostsClient(WordPressClient(config))


@pytest.mark.asyncio
@respx.mock
async def test_list_published_posts_page_size_five(posts):
    route = respx.get(f"{BASE}/posts").mock(
        return_value=Response(
            200,
            json=[{"id": i, "status": "publish"} for i in range(1, 6)],
        )
    )

    async with posts:
        result = await posts.list({"status": "publish", "per_page": 5})

    params = route.calls[0].request.url.params
    assert params["status"] == "publish"
    assert params["per_page"] == "5"
    assert set(params.keys()) == {"status", "per_page"}
    assert len(result) <= 5
    assert all(p["status"] == "publish" for p in result)


@pytest.mark.asyncio
@respx.mock
async def test_list_without_filters_sends_no_query(posts):
    route = respx.get(f"{BASE}/posts").mock(return_value=Response(200, json=[]))

    async with posts:
        result = await posts.list()

    assert result == []
    assert route.calls[0].request.url.query == b""


@pytest.mark.asyncio
async def test_unknown_filter_key_raises_without_network_call(posts):
    async with respx.mock(assert_all_called=False) as mock:
        route = mock.get(f"{BASE}/posts").mock(return_value=Response(200, json=[]))

        async with posts:
            with pytest.raises(WordPressValidationError):
                await posts.list({"foo": 1})

        assert not route.called


@pytest.mark.asyncio
@respx.mock
async def test_list_with_object_body_is_parse_error(posts):
    respx.get(f"{BASE}/posts").mock(return_value=Response(200, json={"id": 1}))

    async with posts:
        with pytest.raises(WordPressParseError):
            await posts.list()


@pytest.mark.asyncio
@respx.mock
async def test_get_twice_returns_identical_entity(posts):
    entity = {"id": 7, "title": {"rendered": "Hello"}, "status": "publish"}
    respx.get(f"{BASE}/posts/7").mock(return_value=Response(200, json=entity))

    async with posts:
        first = await posts.get(7)
        second = await posts.get(7)

    assert first == second == entity


@pytest.mark.asyncio
@respx.mock
async def test_get_missing_post_raises_not_found(posts):
    respx.get(f"{BASE}/posts/404").mock(return_value=Response(404, json=INVALID_ID))

    async with posts:
        with pytest.raises(WordPressNotFoundError):
            await posts.get(404)


@pytest.mark.asyncio
@respx.mock
async def test_create_posts_json_body(posts):
    route = respx.post(f"{BASE}/posts").mock(
        return_value=Response(201, json={"id": 11, "status": "draft"})
    )

    async with posts:
        created = await posts.create(
            {"title": "Hello", "status": "draft", "categories": [3]}
        )

    assert created["id"] == 11
    request = route.calls[0].request
    assert request.headers["Content-Type"] == "application/json"
    assert json.loads(request.content) == {
        "title": "Hello",
        "status": "draft",
        "categories": [3],
    }


@pytest.mark.asyncio
async def test_create_with_unknown_field_raises_without_network_call(posts):
    async with respx.mock(assert_all_called=False) as mock:
        route = mock.post(f"{BASE}/posts").mock(return_value=Response(201, json={}))

        async with posts:
            with pytest.raises(WordPressValidationError):
                await posts.create({"title": "x", "parent": 3})

        assert not route.called


@pytest.mark.asyncio
@respx.mock
async def test_update_sends_only_supplied_fields(posts):
    route = respx.patch(f"{BASE}/posts/7").mock(
        return_value=Response(200, json={"id": 7, "title": {"raw": "New"}})
    )

    async with posts:
        await posts.update(7, {"title": "New"})

    assert json.loads(route.calls[0].request.content) == {"title": "New"}


@pytest.mark.asyncio
@respx.mock
async def test_empty_update_round_trips_current_entity(posts):
    current = {"id": 7, "title": {"raw": "Same"}}
    route = respx.patch(f"{BASE}/posts/7").mock(
        return_value=Response(200, json=current)
    )

    async with posts:
        result = await posts.update(7, {})

    assert result == current
    assert json.loads(route.calls[0].request.content) == {}


@pytest.mark.asyncio
@respx.mock
async def test_delete_nonexistent_raises_not_found(posts):
    respx.delete(f"{BASE}/posts/999").mock(
        return_value=Response(404, json=INVALID_ID)
    )

    async with posts:
        with pytest.raises(WordPressNotFoundError):
            await posts.delete(999)


@pytest.mark.asyncio
@respx.mock
async def test_delete_passes_force_only_when_given(posts):
    route = respx.delete(f"{BASE}/posts/5").mock(
        side_effect=[
            Response(200, json={"id": 5, "status": "trash"}),
            Response(200, json={"deleted": True, "previous": {"id": 5}}),
        ]
    )

    async with posts:
        trashed = await posts.delete(5)
        purged = await posts.delete(5, force=True)

    assert trashed["status"] == "trash"
    assert purged["deleted"] is True
    assert "force" not in route.calls[0].request.url.params
    assert route.calls[1].request.url.params["force"] == "true"


@pytest.mark.asyncio
async def test_invalid_id_raises_without_network_call(posts):
    async with respx.mock(assert_all_called=False) as mock:
        route = mock.get(url__regex=rf"{BASE}/posts/.*").mock(
            return_value=Response(200, json={})
        )

        async with posts:
            with pytest.raises(WordPressValidationError):
                await posts.get("7")
            with pytest.raises(WordPressValidationError):
                await posts.delete(0)
            with pytest.raises(WordPressValidationError):
                await posts.delete(3, force="yes")

        assert not route.called


@pytest.mark.asyncio
@respx.mock
async def test_post_revisions(posts):
    respx.get(f"{BASE}/posts/7/revisions").mock(
        return_value=Response(200, json=[{"id": 70, "parent": 7}])
    )

    async with posts:
        revisions = await posts.get_revisions(7)

    assert revisions == [{"id": 70, "parent": 7}]


@pytest.mark.asyncio
@respx.mock
async def test_pages_filters_and_payload(config):
    list_route = respx.get(f"{BASE}/pages").mock(return_value=Response(200, json=[]))
    create_route = respx.post(f"{BASE}/pages").mock(
        return_value=Response(201, json={"id": 2})
    )

    async with PagesClient(WordPressClient(config)) as pages:
        await pages.list({"parent": 4, "menu_order": 1, "parent_exclude": [5, 6]})
        await pages.create({"title": "About", "parent": 4, "menu_order": 2})

    params = list_route.calls[0].request.url.params
    assert params["parent"] == "4"
    assert params["menu_order"] == "1"
    assert params["parent_exclude"] == "5,6"
    assert json.loads(create_route.calls[0].request.content)["menu_order"] == 2


@pytest.mark.asyncio
@respx.mock
async def test_pages_reject_post_only_payload_fields(config):
    async with PagesClient(WordPressClient(config)) as pages:
        with pytest.raises(WordPressValidationError):
            await pages.create({"title": "About", "sticky": True})


@pytest.mark.asyncio
@respx.mock
async def test_blocks_crud_and_revisions(config):
    list_route = respx.get(f"{BASE}/blocks").mock(
        return_value=Response(200, json=[{"id": 1, "slug": "cta"}])
    )
    respx.post(f"{BASE}/blocks").mock(return_value=Response(201, json={"id": 2}))
    respx.get(f"{BASE}/blocks/2/revisions").mock(return_value=Response(200, json=[]))

    async with BlocksClient(WordPressClient(config)) as blocks:
        listed = await blocks.list({"slug": ["cta"]})
        created = await blocks.create(
            {"title": "CTA", "content": "<!-- wp:paragraph -->", "status": "publish"}
        )
        revisions = await blocks.get_revisions(2)

    assert listed[0]["slug"] == "cta"
    assert list_route.calls[0].request.url.params.get_list("slug[]") == ["cta"]
    assert created == {"id": 2}
    assert revisions == []


@pytest.mark.asyncio
@respx.mock
async def test_blocks_reject_author_filter(config):
    async with BlocksClient(WordPressClient(config)) as blocks:
        with pytest.raises(WordPressValidationError):
            await blocks.list({"author": 1})
