"""
Todo Service

Command handlers for todo-cli. Each operation performs one
load-mutate-save cycle against a TodoStoreProtocol; read-only
operations never save.
"""

from __future__ import annotations

from datetime import date

import structlog

from todo_cli.core.domain.enums import ListFilter, Priority
from todo_cli.core.domain.errors import NotFoundError
from todo_cli.core.domain.todo import (
    Todo,
    filter_todos,
    find_todo,
    next_id,
    parse_due_date,
    parse_priority,
    validate_description,
)
from todo_cli.core.interfaces.store import TodoStoreProtocol
from todo_cli.core.utils.time import local_today


class TodoService:
    """
    Add, list, complete and remove todos.

    Example:
        >>> service = TodoService(FileTodoStore(path))
        >>> todo = await service.add("Buy milk", priority=Priority.LOW)
        >>> await service.done(todo.id)
    """

    def __init__(self, store: TodoStoreProtocol):
        self.store = store
        self.logger = structlog.get_logger().bind(component="todo_service")

    async def add(
        self,
        description: str,
        priority: Priority | str = Priority.MEDIUM,
        due_date: str | date | None = None,
    ) -> Todo:
        """
        Append a new pending todo with a fresh id.

        Args:
            description: Task text, must not be blank
            priority: Priority level (default medium)
            due_date: Optional ``YYYY-MM-DD`` date

        Returns:
            The created Todo

        Raises:
            ValidationError: If description is blank or due_date is not a date
        """
        text = validate_description(description)
        level = parse_priority(priority)
        due = parse_due_date(due_date)

        todos = await self.store.load()
        todo = Todo(
            id=next_id(todos),
            description=text,
            priority=level,
            due_date=due,
            created_at=local_today(),
        )
        todos.append(todo)
        await self.store.save(todos)

        self.logger.info("todo_added", todo_id=todo.id, priority=level.value)
        return todo

    async def list(self, list_filter: ListFilter = ListFilter.ALL) -> list[Todo]:
        """Return the todos matching the filter in insertion order."""
        todos = await self.store.load()
        selected = filter_todos(todos, ListFilter(list_filter))
        self.logger.debug(
            "todos_listed", filter=ListFilter(list_filter).value, count=len(selected)
        )
        return selected

    async def done(self, todo_id: int) -> Todo:
        """
        Mark a todo as done.

        Raises:
            NotFoundError: If no todo has the given id
        """
        todos = await self.store.load()
        todo = find_todo(todos, todo_id)
        if todo is None:
            raise NotFoundError(todo_id)

        todo.mark_done()
        await self.store.save(todos)

        self.logger.info("todo_completed", todo_id=todo_id)
        return todo

    async def remove(self, todo_id: int) -> Todo:
        """
        Delete a todo.

        Returns:
            The removed Todo

        Raises:
            NotFoundError: If no todo has the given id
        """
        todos = await self.store.load()
        todo = find_todo(todos, todo_id)
        if todo is None:
            raise NotFoundError(todo_id)

        remaining = [item for item in todos if item.id != todo_id]
        await self.store.save(remaining)

        self.logger.info("todo_removed", todo_id=todo_id)
        return todo
