# -*- coding: utf-8 -*-
"""
Unit тесты QuestionController с замоканными сценариями использования
"""

import json
import re
from datetime import datetime, timezone
from unittest.mock import AsyncMock, Mock

import pytest

from src.api.v1.questions.controller import (QuestionController,
                                             QuestionUseCases)
from src.utils.exceptions import NotFoundError
from tests.fixtures import make_image, make_question_fields, make_question_json


def use_case_factory(result=None, error=None) -> Mock:
    """Фабрика сценария, execute которого возвращает result или бросает error"""
    use_case = Mock()
    use_case.execute = AsyncMock(return_value=result, side_effect=error)
    return Mock(return_value=use_case)


def body(response) -> dict:
    return json.loads(response.body)


@pytest.fixture
def repository():
    return Mock(name="repository")


def make_controller(repository, **factories) -> QuestionController:
    defaults = {
        name: use_case_factory()
        for name in ("get_all", "get_by_topic", "get_one", "add", "update", "delete")
    }
    defaults.update(factories)
    return QuestionController(repository, QuestionUseCases(**defaults))


class TestIndex:
    """GET /questions"""

    @pytest.mark.asyncio
    async def test_without_topic_lists_all(self, repository):
        questions = [{"id": "q1"}, {"id": "q2"}]
        get_all, get_by_topic = use_case_factory(questions), use_case_factory()
        controller = make_controller(
            repository, get_all=get_all, get_by_topic=get_by_topic
        )

        response = await controller.index(None)

        assert response.status_code == 200
        assert body(response) == questions
        get_all.assert_called_once_with(repository)
        get_all.return_value.execute.assert_awaited_once_with()
        get_by_topic.assert_not_called()

    @pytest.mark.asyncio
    async def test_with_topic_filters(self, repository):
        questions = [{"id": "q1", "topic": "Wisata"}]
        get_all, get_by_topic = use_case_factory(), use_case_factory(questions)
        controller = make_controller(
            repository, get_all=get_all, get_by_topic=get_by_topic
        )

        response = await controller.index("Wisata")

        assert response.status_code == 200
        assert body(response) == questions
        get_by_topic.return_value.execute.assert_awaited_once_with("Wisata")
        get_all.assert_not_called()

    @pytest.mark.asyncio
    async def test_empty_result_is_ok(self, repository):
        controller = make_controller(repository, get_all=use_case_factory([]))

        response = await controller.index()

        assert response.status_code == 200
        assert body(response) == []

    @pytest.mark.asyncio
    async def test_topic_without_questions(self, repository):
        get_all, get_by_topic = use_case_factory(), use_case_factory([])
        controller = make_controller(
            repository, get_all=get_all, get_by_topic=get_by_topic
        )

        response = await controller.index("Olahraga")

        assert response.status_code == 200
        assert body(response) == []
        get_by_topic.return_value.execute.assert_awaited_once_with("Olahraga")
        get_all.assert_not_called()

    @pytest.mark.asyncio
    async def test_invalid_topic(self, repository):
        get_by_topic = use_case_factory()
        controller = make_controller(repository, get_by_topic=get_by_topic)

        response = await controller.index("   ")

        assert response.status_code == 400
        assert body(response) == {"message": "topic must not be empty"}
        get_by_topic.assert_not_called()

    @pytest.mark.asyncio
    async def test_error_is_500(self, repository):
        controller = make_controller(
            repository, get_all=use_case_factory(error=RuntimeError("db down"))
        )

        response = await controller.index()

        assert response.status_code == 500
        assert body(response) == {"message": "db down"}

    @pytest.mark.asyncio
    async def test_untyped_not_found_message_is_500(self, repository):
        controller = make_controller(
            repository, get_by_topic=use_case_factory(error=Exception("Not Found"))
        )

        response = await controller.index("Makanan")

        assert response.status_code == 500

    @pytest.mark.asyncio
    async def test_not_found_error_is_500(self, repository):
        """У списка нет ответа 404, любая ошибка даёт 500"""
        controller = make_controller(
            repository, get_all=use_case_factory(error=NotFoundError())
        )

        response = await controller.index()

        assert response.status_code == 500
        assert body(response) == {"message": "Not Found"}


class TestShow:
    """GET /questions/{id}"""

    @pytest.mark.asyncio
    async def test_success(self, repository):
        question = {"id": "abc123", "question": "Q?"}
        get_one = use_case_factory(question)
        controller = make_controller(repository, get_one=get_one)

        response = await controller.show("abc123")

        assert response.status_code == 200
        assert body(response) == question
        get_one.return_value.execute.assert_awaited_once_with("abc123")

    @pytest.mark.asyncio
    async def test_not_found(self, repository):
        controller = make_controller(
            repository, get_one=use_case_factory(error=NotFoundError("Question", "x"))
        )

        response = await controller.show("x")

        assert response.status_code == 404
        assert body(response) == {"message": "Not Found"}

    @pytest.mark.asyncio
    async def test_untyped_not_found_message_is_404(self, repository):
        """Ошибка без типа с текстом «Not Found» тоже даёт 404"""
        controller = make_controller(
            repository, get_one=use_case_factory(error=Exception("Not Found"))
        )

        response = await controller.show("x")

        assert response.status_code == 404
        assert body(response) == {"message": "Not Found"}

    @pytest.mark.asyncio
    async def test_other_error(self, repository):
        controller = make_controller(
            repository, get_one=use_case_factory(error=ValueError("boom"))
        )

        response = await controller.show("x")

        assert response.status_code == 500
        assert body(response) == {"message": "boom"}

    @pytest.mark.asyncio
    async def test_invalid_id(self, repository):
        get_one = use_case_factory()
        controller = make_controller(repository, get_one=get_one)

        response = await controller.show(" ")

        assert response.status_code == 400
        assert body(response) == {"message": "id is required"}
        get_one.assert_not_called()


class TestStore:
    """POST /questions"""

    @pytest.mark.asyncio
    async def test_without_image(self, repository):
        add = use_case_factory("abc123")
        controller = make_controller(repository, add=add)

        response = await controller.store(make_question_json())

        assert response.status_code == 201
        assert body(response) == {"message": "Question created with id: abc123"}
        add.assert_called_once_with(repository)
        add.return_value.execute.assert_awaited_once_with(make_question_fields())

    @pytest.mark.asyncio
    async def test_with_image(self, repository):
        add = use_case_factory("abc123")
        controller = make_controller(repository, add=add)
        image = make_image("cat.png")

        response = await controller.store(make_question_json(topic="Makanan"), image)

        assert response.status_code == 201
        fields, passed_image = add.return_value.execute.await_args.args
        assert re.fullmatch(r"foods/\d+-cat\.png", fields["img_url"])
        assert fields["topic"] == "Makanan"
        assert passed_image is image

    @pytest.mark.asyncio
    async def test_with_image_unknown_topic(self, repository):
        add = use_case_factory("abc123")
        controller = make_controller(repository, add=add)

        await controller.store(make_question_json(topic="Unknown"), make_image())

        fields, _ = add.return_value.execute.await_args.args
        assert fields["img_url"] is None

    @pytest.mark.asyncio
    async def test_invalid_payload(self, repository):
        add = use_case_factory()
        controller = make_controller(repository, add=add)

        response = await controller.store(None)

        assert response.status_code == 400
        assert body(response) == {"message": "json is required"}
        add.assert_not_called()

    @pytest.mark.asyncio
    async def test_malformed_json_is_400(self, repository):
        add = use_case_factory()
        controller = make_controller(repository, add=add)

        response = await controller.store("{oops")

        assert response.status_code == 400
        assert "Invalid JSON" in body(response)["message"]
        add.assert_not_called()

    @pytest.mark.asyncio
    async def test_error_is_500(self, repository):
        controller = make_controller(
            repository, add=use_case_factory(error=RuntimeError("write failed"))
        )

        response = await controller.store(make_question_json())

        assert response.status_code == 500
        assert body(response) == {"message": "write failed"}

    @pytest.mark.asyncio
    async def test_not_found_error_is_500(self, repository):
        """При создании ответа 404 не бывает"""
        controller = make_controller(
            repository, add=use_case_factory(error=NotFoundError())
        )

        response = await controller.store(make_question_json())

        assert response.status_code == 500
        assert body(response) == {"message": "Not Found"}


class TestUpdate:
    """PUT /questions/{id}"""

    @pytest.mark.asyncio
    async def test_without_image(self, repository):
        update = use_case_factory("2024-01-01T00:00:00Z")
        controller = make_controller(repository, update=update)

        response = await controller.update("abc123", make_question_json())

        assert response.status_code == 200
        assert body(response) == {"updateTime": "2024-01-01T00:00:00Z"}
        update.return_value.execute.assert_awaited_once_with(
            {"id": "abc123", **make_question_fields()}
        )

    @pytest.mark.asyncio
    async def test_with_image(self, repository):
        update_time = datetime(2024, 1, 1, tzinfo=timezone.utc)
        update = use_case_factory(update_time)
        controller = make_controller(repository, update=update)
        image = make_image("tugu.jpg")

        response = await controller.update(
            "abc123", make_question_json(topic="Wisata"), image
        )

        assert response.status_code == 200
        assert body(response) == {"updateTime": "2024-01-01T00:00:00+00:00"}
        fields, passed_image = update.return_value.execute.await_args.args
        assert fields["id"] == "abc123"
        assert re.fullmatch(r"tourisms/\d+-tugu\.jpg", fields["img_url"])
        assert passed_image is image

    @pytest.mark.asyncio
    async def test_not_found(self, repository):
        controller = make_controller(
            repository, update=use_case_factory(error=NotFoundError())
        )

        response = await controller.update("missing", make_question_json())

        assert response.status_code == 404
        assert body(response) == {"message": "Not Found"}

    @pytest.mark.asyncio
    async def test_untyped_not_found_message_is_404(self, repository):
        controller = make_controller(
            repository, update=use_case_factory(error=Exception("Not Found"))
        )

        response = await controller.update("abc123", make_question_json())

        assert response.status_code == 404
        assert body(response) == {"message": "Not Found"}

    @pytest.mark.asyncio
    async def test_similar_message_is_500(self, repository):
        controller = make_controller(
            repository, update=use_case_factory(error=Exception("not found"))
        )

        response = await controller.update("abc123", make_question_json())

        assert response.status_code == 500

    @pytest.mark.asyncio
    async def test_other_error(self, repository):
        controller = make_controller(
            repository, update=use_case_factory(error=RuntimeError("boom"))
        )

        response = await controller.update("abc123", make_question_json())

        assert response.status_code == 500

    @pytest.mark.asyncio
    async def test_invalid_id(self, repository):
        update = use_case_factory()
        controller = make_controller(repository, update=update)

        response = await controller.update("a/b", make_question_json())

        assert response.status_code == 400
        update.assert_not_called()


class TestDestroy:
    """DELETE /questions/{id}"""

    @pytest.mark.asyncio
    async def test_success(self, repository):
        delete = use_case_factory("2024-01-02T00:00:00Z")
        controller = make_controller(repository, delete=delete)

        response = await controller.destroy("abc123")

        assert response.status_code == 200
        assert body(response) == {"deleteTime": "2024-01-02T00:00:00Z"}
        delete.return_value.execute.assert_awaited_once_with("abc123")

    @pytest.mark.asyncio
    async def test_not_found(self, repository):
        controller = make_controller(
            repository, delete=use_case_factory(error=NotFoundError())
        )

        response = await controller.destroy("missing")

        assert response.status_code == 404
        assert body(response) == {"message": "Not Found"}

    @pytest.mark.asyncio
    async def test_untyped_not_found_message_is_404(self, repository):
        controller = make_controller(
            repository, delete=use_case_factory(error=Exception("Not Found"))
        )

        response = await controller.destroy("missing")

        assert response.status_code == 404
        assert body(response) == {"message": "Not Found"}

    @pytest.mark.asyncio
    async def test_other_error(self, repository):
        controller = make_controller(
            repository, delete=use_case_factory(error=RuntimeError("boom"))
        )

        response = await controller.destroy("abc123")

        assert response.status_code == 500
        assert body(response) == {"message": "boom"}

    @pytest.mark.asyncio
    async def test_invalid_id_returns_bad_request_response(self, repository):
        """Невалидный ID даёт обычный ответ 400 с сообщением"""
        delete = use_case_factory()
        controller = make_controller(repository, delete=delete)

        response = await controller.destroy("")

        assert response.status_code == 400
        assert body(response) == {"message": "id is required"}
        delete.assert_not_called()
