"""Tests for post API endpoints."""

import uuid
from collections.abc import Callable

import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from minipress.db.crud import create_post
from minipress.models.post import Post
from minipress.models.schemas import PostRequest
from minipress.models.user import Role, User


@pytest_asyncio.fixture
async def post(db_session: AsyncSession, test_user: User) -> Post:
    """A post owned by ``test_user``."""
    return await create_post(
        db_session, test_user.id, PostRequest(title="Original Title", content="Original body")
    )


class TestReadPosts:
    """Tests for public post endpoints."""

    @pytest.mark.asyncio
    async def test_list_posts_empty(self, client: AsyncClient):
        """Test listing posts without logging in."""
        response = await client.get("/posts")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_list_posts(self, client: AsyncClient, post: Post, test_user: User):
        """Test that listed posts carry hex IDs and derived fields."""
        response = await client.get("/posts")

        assert response.status_code == 200
        [data] = response.json()
        assert data["id"] == post.id.hex
        assert data["user_id"] == test_user.id.hex
        assert data["slug"] == "original-title"
        assert data["excerpt"] == "Original body"

    @pytest.mark.asyncio
    async def test_get_post(self, client: AsyncClient, post: Post):
        """Test fetching a single post."""
        response = await client.get(f"/post/{post.id.hex}")

        assert response.status_code == 200
        assert response.json()["title"] == "Original Title"

    @pytest.mark.asyncio
    async def test_get_post_invalid_id(self, client: AsyncClient):
        """Test that an unparseable ID is a 400."""
        response = await client.get("/post/12345")

        assert response.status_code == 400
        assert response.json() == {"detail": "Invalid Post ID"}

    @pytest.mark.asyncio
    async def test_get_post_not_found(self, client: AsyncClient):
        """Test that an unknown ID is a 404."""
        response = await client.get(f"/post/{uuid.uuid4().hex}")
        assert response.status_code == 404


class TestCreatePost:
    """Tests for POST /post."""

    @pytest.mark.asyncio
    async def test_create_requires_login(self, client: AsyncClient):
        """Test that anonymous users cannot publish."""
        response = await client.post("/post", json={"title": "t", "content": "c"})
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_create_post(self, authenticated_client: AsyncClient, test_user: User):
        """Test publishing as an author."""
        response = await authenticated_client.post(
            "/post", json={"title": "My First Post", "content": "Hello there"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["user_id"] == test_user.id.hex
        assert data["slug"] == "my-first-post"
        assert data["excerpt"] == "Hello there"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "role,status",
        [
            (Role.SUPER_ADMIN, 200),
            (Role.ADMIN, 200),
            (Role.EDITOR, 200),
            (Role.AUTHOR, 200),
            (Role.CONTRIBUTOR, 401),
            (Role.SUBSCRIBER, 401),
            (Role.GUEST, 401),
        ],
    )
    async def test_create_role_gate(
        self,
        client: AsyncClient,
        login_as: Callable,
        make_user: Callable,
        role: Role,
        status: int,
    ):
        """Test which roles may publish."""
        login_as(await make_user(f"user-{role.slug}", role=role))

        response = await client.post("/post", json={"title": "Gate", "content": "c"})

        assert response.status_code == status

    @pytest.mark.asyncio
    async def test_create_invalid_payload(self, authenticated_client: AsyncClient):
        """Test that a payload without a title is a 400."""
        response = await authenticated_client.post("/post", json={"content": "no title"})
        assert response.status_code == 400


class TestModifyPost:
    """Tests for PUT and DELETE /post/{id}."""

    @pytest.mark.asyncio
    async def test_update_requires_login(self, client: AsyncClient, post: Post):
        """Test that anonymous users cannot edit."""
        response = await client.put(f"/post/{post.id.hex}", json={"title": "t", "content": "c"})
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_owner_updates_post(self, authenticated_client: AsyncClient, post: Post):
        """Test that the owner can edit and the slug stays put."""
        response = await authenticated_client.put(
            f"/post/{post.id.hex}", json={"title": "Brand New Title", "content": "New body"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "Brand New Title"
        assert data["slug"] == "original-title"
        assert data["content"] == "New body"
        assert data["excerpt"] == "New body"

    @pytest.mark.asyncio
    async def test_other_author_cannot_update(
        self, client: AsyncClient, login_as: Callable, other_user: User, post: Post
    ):
        """Test that authors cannot edit someone else's post."""
        login_as(other_user)

        response = await client.put(f"/post/{post.id.hex}", json={"title": "t", "content": "c"})

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_editor_updates_any_post(
        self, client: AsyncClient, login_as: Callable, make_user: Callable, post: Post
    ):
        """Test that editors can edit posts they do not own."""
        login_as(await make_user("an-editor", role=Role.EDITOR))

        response = await client.put(
            f"/post/{post.id.hex}", json={"title": "Edited", "content": "By an editor"}
        )

        assert response.status_code == 200
        assert response.json()["title"] == "Edited"

    @pytest.mark.asyncio
    async def test_update_not_found(self, authenticated_client: AsyncClient):
        """Test updating an unknown post."""
        response = await authenticated_client.put(
            f"/post/{uuid.uuid4().hex}", json={"title": "t", "content": "c"}
        )
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_requires_login(self, client: AsyncClient, post: Post):
        """Test that anonymous users cannot delete."""
        response = await client.delete(f"/post/{post.id.hex}")
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_other_author_cannot_delete(
        self, client: AsyncClient, login_as: Callable, other_user: User, post: Post
    ):
        """Test that authors cannot delete someone else's post."""
        login_as(other_user)

        response = await client.delete(f"/post/{post.id.hex}")

        assert response.status_code == 403
        assert (await client.get(f"/post/{post.id.hex}")).status_code == 200

    @pytest.mark.asyncio
    async def test_owner_deletes_post(self, authenticated_client: AsyncClient, post: Post):
        """Test that the owner can delete, and a second delete is a 404."""
        response = await authenticated_client.delete(f"/post/{post.id.hex}")

        assert response.status_code == 200
        assert response.json() == {"deleted": 1, "message": "Successfully deleted 1 record(s)"}

        again = await authenticated_client.delete(f"/post/{post.id.hex}")
        assert again.status_code == 404
