"""Tests for TodoController routing of service results and errors."""

from unittest.mock import Mock

import pytest

from todoapp.controller import TodoController
from todoapp.exceptions import (
    TagRepositoryError,
    TaskRepositoryError,
    TransactionAbortedError,
)
from todoapp.schemas.models import Tag, Task
from todoapp.services import TodoService
from todoapp.views import TodoView


@pytest.fixture
def service():
    return Mock(spec=TodoService)


@pytest.fixture
def view():
    return Mock(spec=TodoView)


@pytest.fixture
def controller(service, view):
    return TodoController(service, view)


class TestTaskActions:
    """Actions issued from the tasks tab."""

    def test_get_all_tasks(self, controller, service, view, sample_task):
        service.get_all_tasks.return_value = [sample_task]

        controller.get_all_tasks()

        view.show_all_tasks.assert_called_once_with([sample_task])

    def test_get_all_tasks_aborted(self, controller, service, view):
        service.get_all_tasks.side_effect = TransactionAbortedError(
            "Task transaction failed, aborting"
        )

        controller.get_all_tasks()

        view.task_error.assert_called_once_with("Task transaction failed, aborting")
        view.show_all_tasks.assert_not_called()

    def test_add_task(self, controller, service, view, sample_task):
        controller.add_task(sample_task)

        service.save_task.assert_called_once_with(sample_task)
        view.task_added.assert_called_once_with(sample_task)

    def test_add_task_duplicated(self, controller, service, view, sample_task):
        service.save_task.side_effect = TaskRepositoryError(
            "Cannot add task with duplicated ID 1"
        )

        controller.add_task(sample_task)

        view.task_error.assert_called_once_with("Cannot add task with duplicated ID 1")
        view.task_added.assert_not_called()

    def test_delete_task(self, controller, service, view, sample_task):
        controller.delete_task(sample_task)

        service.delete_task.assert_called_once_with(sample_task)
        view.task_deleted.assert_called_once_with(sample_task)

    def test_delete_task_already_deleted(self, controller, service, view, sample_task):
        service.delete_task.side_effect = TaskRepositoryError(
            "Task with ID 1 has already been deleted"
        )

        controller.delete_task(sample_task)

        view.task_error.assert_called_once_with(
            "Task with ID 1 has already been deleted"
        )
        view.task_deleted.assert_not_called()

    def test_get_tags_by_task(self, controller, service, view, sample_task):
        tags = {"1": Tag(id="1", name="Important"), "2": Tag(id="2", name="Work")}
        service.find_tags_by_task_id.return_value = ["1", "2"]
        service.find_tag_by_id.side_effect = tags.get

        controller.get_tags_by_task(sample_task)

        service.find_tags_by_task_id.assert_called_once_with("1")
        view.show_task_tags.assert_called_once_with([tags["1"], tags["2"]])

    def test_get_tags_by_task_skips_vanished_tags(
        self, controller, service, view, sample_task, sample_tag
    ):
        service.find_tags_by_task_id.return_value = ["1", "9"]
        service.find_tag_by_id.side_effect = {"1": sample_tag}.get

        controller.get_tags_by_task(sample_task)

        view.show_task_tags.assert_called_once_with([sample_tag])

    def test_add_tag_to_task(self, controller, service, view, sample_task, sample_tag):
        controller.add_tag_to_task(sample_task, sample_tag)

        service.add_tag_to_task.assert_called_once_with("1", "1")
        view.tag_added_to_task.assert_called_once_with(sample_tag)

    def test_add_tag_to_task_tag_error(
        self, controller, service, view, sample_task, sample_tag
    ):
        service.add_tag_to_task.side_effect = TagRepositoryError("Tag with ID 1 not found")

        controller.add_tag_to_task(sample_task, sample_tag)

        view.tag_error.assert_called_once_with("Tag with ID 1 not found")
        view.tag_added_to_task.assert_not_called()

    def test_add_tag_to_task_aborted_shows_on_tasks_tab(
        self, controller, service, view, sample_task, sample_tag
    ):
        service.add_tag_to_task.side_effect = TransactionAbortedError(
            "Composite transaction failed, aborting"
        )

        controller.add_tag_to_task(sample_task, sample_tag)

        view.task_error.assert_called_once_with(
            "Composite transaction failed, aborting"
        )
        view.tag_error.assert_not_called()

    def test_remove_tag_from_task(
        self, controller, service, view, sample_task, sample_tag
    ):
        controller.remove_tag_from_task(sample_task, sample_tag)

        service.remove_tag_from_task.assert_called_once_with("1", "1")
        view.tag_removed_from_task.assert_called_once_with(sample_tag)

    def test_remove_tag_from_task_task_error(
        self, controller, service, view, sample_task, sample_tag
    ):
        service.remove_tag_from_task.side_effect = TaskRepositoryError(
            "Task with ID 1 not found"
        )

        controller.remove_tag_from_task(sample_task, sample_tag)

        view.task_error.assert_called_once_with("Task with ID 1 not found")
        view.tag_removed_from_task.assert_not_called()


class TestTagActions:
    """Actions issued from the tags tab."""

    def test_get_all_tags(self, controller, service, view, sample_tag):
        service.get_all_tags.return_value = [sample_tag]

        controller.get_all_tags()

        view.show_all_tags.assert_called_once_with([sample_tag])

    def test_add_tag(self, controller, service, view, sample_tag):
        controller.add_tag(sample_tag)

        service.save_tag.assert_called_once_with(sample_tag)
        view.tag_added.assert_called_once_with(sample_tag)

    def test_add_tag_duplicated_name(self, controller, service, view, sample_tag):
        service.save_tag.side_effect = TagRepositoryError(
            'Cannot add tag with duplicated name "Important"'
        )

        controller.add_tag(sample_tag)

        view.tag_error.assert_called_once_with(
            'Cannot add tag with duplicated name "Important"'
        )
        view.tag_added.assert_not_called()

    def test_delete_tag(self, controller, service, view, sample_tag):
        controller.delete_tag(sample_tag)

        service.delete_tag.assert_called_once_with(sample_tag)
        view.tag_deleted.assert_called_once_with(sample_tag)

    def test_delete_tag_aborted(self, controller, service, view, sample_tag):
        service.delete_tag.side_effect = TransactionAbortedError("aborted")

        controller.delete_tag(sample_tag)

        view.tag_error.assert_called_once_with("aborted")
        view.tag_deleted.assert_not_called()

    def test_get_tasks_by_tag(self, controller, service, view, sample_tag, sample_task):
        service.find_tasks_by_tag_id.return_value = ["1"]
        service.find_task_by_id.return_value = sample_task

        controller.get_tasks_by_tag(sample_tag)

        service.find_task_by_id.assert_called_once_with("1")
        view.show_tag_tasks.assert_called_once_with([sample_task])

    def test_get_tasks_by_missing_tag(self, controller, service, view, sample_tag):
        service.find_tasks_by_tag_id.side_effect = TagRepositoryError(
            "Tag with ID 1 not found"
        )

        controller.get_tasks_by_tag(sample_tag)

        view.tag_error.assert_called_once_with("Tag with ID 1 not found")
        view.show_tag_tasks.assert_not_called()

    def test_add_task_to_tag(self, controller, service, view, sample_tag, sample_task):
        controller.add_task_to_tag(sample_tag, sample_task)

        service.add_tag_to_task.assert_called_once_with("1", "1")
        view.task_added_to_tag.assert_called_once_with(sample_task)

    def test_remove_task_from_tag(
        self, controller, service, view, sample_tag, sample_task
    ):
        controller.remove_task_from_tag(sample_tag, sample_task)

        service.remove_task_from_tag.assert_called_once_with("1", "1")
        view.task_removed_from_tag.assert_called_once_with(sample_task)

    def test_remove_task_from_tag_aborted_shows_on_tags_tab(
        self, controller, service, view, sample_tag, sample_task
    ):
        service.remove_task_from_tag.side_effect = TransactionAbortedError("aborted")

        controller.remove_task_from_tag(sample_tag, sample_task)

        view.tag_error.assert_called_once_with("aborted")
        view.task_removed_from_tag.assert_not_called()
