"""Persistence layer for user data."""

from __future__ import annotations

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.domain.entities import User
from app.infrastructure.models import UserModel

from .errors import storage_errors


class UserRepository:
    """Provide lookups and creation for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = self._get_model(id=user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        with storage_errors(self.session, "load user"):
            model = (
                self.session.query(UserModel)
                .filter(UserModel.deleted.is_(False))
                .filter(func.lower(UserModel.email) == email.strip().lower())
                .first()
            )
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel()
        self._apply_entity_to_model(model, user)
        with storage_errors(self.session, "create user"):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def _get_model(self, include_deleted: bool = False, **filters) -> UserModel | None:
        with storage_errors(self.session, "load user"):
            query = self.session.query(UserModel)
            if not include_deleted:
                query = query.filter(UserModel.deleted.is_(False))
            return query.filter_by(**filters).first()

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            password=model.password,
            role=model.role,
            is_active=model.is_active,
            created_at=model.created_at,
            deleted=model.deleted,
        )

    @staticmethod
    def _apply_entity_to_model(model: UserModel, user: User) -> None:
        model.name = user.name
        model.email = user.email
        model.password = user.password
        model.role = user.role
        model.is_active = user.is_active
        model.deleted = user.deleted
        if user.created_at is not None:
            model.created_at = user.created_at


__all__ = ["UserRepository"]
