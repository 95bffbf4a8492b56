# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from ott_backend.application.credential_gate import CredentialGate
from ott_backend.application.services.password_hashing import BcryptPasswordHasher
from ott_backend.application.services.tokens import JwtTokenService
from ott_backend.application.use_cases.catalog.add_movie import AddMovieUseCase
from ott_backend.application.use_cases.catalog.delete_movie import DeleteMovieUseCase
from ott_backend.application.use_cases.catalog.list_movies import ListMoviesUseCase
from ott_backend.domain.accounts.policies import HandlePolicy
from ott_backend.domain.accounts.repositories import AccountRepository
from ott_backend.domain.catalog.repositories import MovieRepository
from ott_backend.infrastructure.db import Database
from ott_backend.infrastructure.repositories.accounts.sqlalchemy_account_repository import (
    SqlAlchemyAccountRepository,
)
from ott_backend.infrastructure.repositories.catalog.sqlalchemy_movie_repository import (
    SqlAlchemyMovieRepository,
)
from ott_backend.infrastructure.repositories.json_store import (
    JsonAccountRepository,
    JsonDocumentStore,
    JsonMovieRepository,
)
from ott_backend.interfaces.http.controllers.auth_controller import AuthController
from ott_backend.interfaces.http.controllers.catalog_controller import CatalogController
from ott_backend.interfaces.http.controllers.misc_controller import MiscController
from ott_backend.shared.config import AppConfig
from ott_backend.shared.logging import logger


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    # Storage

    @property
    def uses_sql(self) -> bool:
        return self.config.storage.backend == "sqlalchemy"

    @cached_property
    def database(self) -> Database:
        return Database(self.config.database)

    @cached_property
    def json_store(self) -> JsonDocumentStore:
        return JsonDocumentStore(self.config.storage.json_db_path)

    def init_storage(self) -> None:
        if self.uses_sql:
            self.database.init_schema()
        else:
            self.json_store.read("users")
        logger.info(f"storage: backend={self.config.storage.backend}")

    def check_storage(self) -> bool:
        if self.uses_sql:
            return self.database.check()
        self.json_store.read("users")
        return True

    @cached_property
    def account_repository(self) -> AccountRepository:
        if self.uses_sql:
            return SqlAlchemyAccountRepository(self.database.session_scope)
        return JsonAccountRepository(self.json_store, self.handle_policy)

    @cached_property
    def movie_repository(self) -> MovieRepository:
        if self.uses_sql:
            return SqlAlchemyMovieRepository(self.database.session_scope)
        return JsonMovieRepository(self.json_store)

    # Credentials

    @cached_property
    def password_hasher(self) -> BcryptPasswordHasher:
        return BcryptPasswordHasher(rounds=self.config.auth.bcrypt_rounds)

    @cached_property
    def token_service(self) -> JwtTokenService:
        auth = self.config.auth
        return JwtTokenService(
            auth.jwt_secret,
            algorithm=auth.jwt_algorithm,
            ttl_seconds=auth.token_ttl_seconds,
        )

    @cached_property
    def handle_policy(self) -> HandlePolicy:
        return HandlePolicy(case_sensitive=self.config.auth.handle_case_sensitive)

    @cached_property
    def credential_gate(self) -> CredentialGate:
        return CredentialGate(
            accounts=self.account_repository,
            password_hasher=self.password_hasher,
            tokens=self.token_service,
            handle_policy=self.handle_policy,
        )

    # Catalog

    @cached_property
    def list_movies_use_case(self) -> ListMoviesUseCase:
        return ListMoviesUseCase(movies=self.movie_repository)

    @cached_property
    def add_movie_use_case(self) -> AddMovieUseCase:
        return AddMovieUseCase(movies=self.movie_repository)

    @cached_property
    def delete_movie_use_case(self) -> DeleteMovieUseCase:
        return DeleteMovieUseCase(movies=self.movie_repository)

    # Controllers

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(
            service_name=self.config.service_name, storage_check=self.check_storage
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(gate=self.credential_gate)

    @cached_property
    def catalog_controller(self) -> CatalogController:
        return CatalogController(
            gate=self.credential_gate,
            list_movies=self.list_movies_use_case,
            add_movie=self.add_movie_use_case,
            delete_movie=self.delete_movie_use_case,
        )
