"""
PetDemo: Dog Endpoint Tests
===========================
"""

import asyncio

import pytest


async def _create(client, name="Rex", breed="Beagle", age=4):
    return await client.post("/setDogName", json={"name": name, "breed": breed, "age": age})


class TestSetDogName:

    @pytest.mark.asyncio
    async def test_create(self, test_client):
        response = await _create(test_client)

        assert response.status_code == 201
        assert response.json() == {"name": "Rex", "breed": "Beagle", "age": 4}

    @pytest.mark.asyncio
    async def test_missing_age(self, test_client):
        response = await test_client.post("/setDogName", json={"name": "Rex", "breed": "Beagle"})

        assert response.status_code == 400
        assert response.json() == {"error": "name, breed and age are all required"}

    @pytest.mark.asyncio
    async def test_age_too_large_for_column(self, test_client):
        response = await _create(test_client, age=10 ** 30)

        assert response.status_code == 400
        assert response.json() == {"error": "age is out of range"}
        assert '<tr class="dog">' not in (await test_client.get("/page4")).text


class TestSearchDogName:

    @pytest.mark.asyncio
    async def test_each_search_ages_the_dog(self, test_client):
        await _create(test_client, age=4)

        first = await test_client.post("/searchDogName", json={"dogname": "Rex"})
        second = await test_client.post("/searchDogName", data={"dogname": "Rex"})

        assert first.status_code == 200
        assert first.json() == {"name": "Rex", "breed": "Beagle", "age": 5}
        assert second.json()["age"] == 6

        # The increment is persisted, not just reported
        page = await test_client.get("/page4")
        assert "<td>6</td>" in page.text

    @pytest.mark.asyncio
    async def test_only_first_match_ages(self, test_client):
        await _create(test_client, breed="Beagle", age=4)
        await _create(test_client, breed="Boxer", age=8)

        response = await test_client.post("/searchDogName", json={"dogname": "Rex"})

        assert response.json() == {"name": "Rex", "breed": "Beagle", "age": 5}
        page = await test_client.get("/page4")
        assert "<td>8</td>" in page.text

    @pytest.mark.asyncio
    async def test_concurrent_searches_each_age_once(self, test_client):
        await _create(test_client, age=1)

        responses = await asyncio.gather(
            *(test_client.post("/searchDogName", json={"dogname": "Rex"}) for _ in range(10))
        )

        assert all(r.status_code == 200 for r in responses)
        assert sorted(r.json()["age"] for r in responses) == list(range(2, 12))
        page = await test_client.get("/page4")
        assert "<td>11</td>" in page.text

    @pytest.mark.asyncio
    async def test_requires_dogname(self, test_client):
        response = await test_client.post("/searchDogName", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "Name is required to perform a search"}

    @pytest.mark.asyncio
    async def test_no_match(self, test_client):
        response = await test_client.post("/searchDogName", json={"dogname": "Ghost"})

        assert response.status_code == 404
        assert response.json() == {"error": "No dog found"}


class TestStoreErrors:

    @pytest.mark.asyncio
    async def test_set_dog_name(self, broken_client):
        response = await _create(broken_client)

        assert response.status_code == 500
        assert response.json() == {"error": "failed to create dog"}

    @pytest.mark.asyncio
    async def test_search_dog_name(self, broken_client):
        response = await broken_client.post("/searchDogName", json={"dogname": "Rex"})

        assert response.status_code == 500
        assert response.json() == {"error": "Something went wrong"}
