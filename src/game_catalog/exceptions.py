"""Domain exceptions raised by services and caught by routers.

Services raise these to signal business-rule violations.
Exception handlers in main.py translate them into HTTP responses:
GameNotFoundError -> 404, DuplicateGameError -> 422, any other DomainError -> 400.
"""

from uuid import UUID


class DomainError(Exception):
    """Base class for all domain exceptions."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested entity does not exist."""


class ConflictError(DomainError):
    """Raised when an operation conflicts with existing state (e.g. duplicate)."""


class GameNotFoundError(NotFoundError):
    """No game is registered under the given id."""

    def __init__(self, game_id: UUID) -> None:
        self.game_id = game_id
        super().__init__("Não existe este jogo")


class DuplicateGameError(ConflictError):
    """Another game already uses this (name, producer) pair."""

    def __init__(self, name: str, producer: str) -> None:
        self.name = name
        self.producer = producer
        super().__init__("Já existe um jogo com este nome para esta produtora")
