"""
PetDemo: Dog Service Unit Tests
===============================
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from petdemo.exceptions import DatabaseError, NotFoundError, ValidationError
from petdemo.services.dog_service import DogService


class TestDogServiceCreate:

    def setup_method(self):
        self.service = DogService()

    @pytest.mark.asyncio
    async def test_create_dog(self, mock_db_session):
        result = await self.service.create_dog(
            mock_db_session, name="Rex", breed="Beagle", age="4"
        )

        assert result.model_dump() == {"name": "Rex", "breed": "Beagle", "age": 4}
        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_dog_missing_breed(self, mock_db_session):
        with pytest.raises(ValidationError) as exc_info:
            await self.service.create_dog(mock_db_session, name="Rex", breed=None, age=4)

        assert exc_info.value.message == "name, breed and age are all required"
        mock_db_session.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_dog_write_failure(self, mock_db_session):
        mock_db_session.commit = AsyncMock(
            side_effect=OperationalError("INSERT", {}, Exception("disk I/O error"))
        )

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.create_dog(mock_db_session, name="Rex", breed="Beagle", age=4)

        assert exc_info.value.message == "failed to create dog"


class TestDogServiceSearch:

    def setup_method(self):
        self.service = DogService()

    @pytest.mark.asyncio
    async def test_search_requires_dogname(self, mock_db_session):
        with pytest.raises(ValidationError) as exc_info:
            await self.service.search_and_age(mock_db_session, None)

        assert exc_info.value.field == "dogname"
        mock_db_session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_search_returns_aged_dog(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.one_or_none.return_value = SimpleNamespace(name="Rex", breed="Beagle", age=5)
        mock_db_session.execute.return_value = mock_result

        result = await self.service.search_and_age(mock_db_session, "Rex")

        assert result.age == 5
        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_search_no_match_is_not_found(self, mock_db_session):
        """A missing dog is reported as 404, never dereferenced."""
        mock_result = MagicMock()
        mock_result.one_or_none.return_value = None
        mock_db_session.execute.return_value = mock_result

        with pytest.raises(NotFoundError) as exc_info:
            await self.service.search_and_age(mock_db_session, "Ghost")

        assert exc_info.value.message == "No dog found"

    @pytest.mark.asyncio
    async def test_list_dogs_store_error(self, mock_db_session):
        mock_db_session.execute = AsyncMock(
            side_effect=OperationalError("SELECT", {}, Exception("connection reset"))
        )

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.list_dogs(mock_db_session)

        assert exc_info.value.message == "failed to find dogs"
