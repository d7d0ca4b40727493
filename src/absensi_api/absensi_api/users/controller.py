from __future__ import annotations

from flask import Flask

from ..common.http import json_body, success
from ..container import Container
from ..core.constants import API_PREFIX
from ..security.guard import karyawan_required, token_required


def register(app: Flask, container: Container) -> None:
    auth_required = token_required(container.token_service)

    @app.route(f"{API_PREFIX}/auth/login", methods=["POST"], endpoint="login")
    def login():
        body = json_body()
        token = container.auth_service.login(body.get("username"), body.get("password"))
        return success(message="Login berhasil", token=token)

    @app.route(f"{API_PREFIX}/users/<int:user_id>", methods=["GET"], endpoint="get_user")
    @auth_required
    @karyawan_required
    def get_user(user_id: int):
        user = container.user_service.get_user(user_id)
        return success(user.to_public())

    @app.route(f"{API_PREFIX}/users", methods=["POST"], endpoint="create_user")
    @auth_required
    @karyawan_required
    def create_user():
        body = json_body()
        data = container.user_service.create_user(
            username=body.get("username"),
            name=body.get("name"),
            email=body.get("email"),
            password=body.get("password"),
            role=body.get("role"),
        )
        return success(data, message="Pengguna berhasil ditambahkan", status=201)

    @app.route(f"{API_PREFIX}/users/<int:user_id>", methods=["PUT"], endpoint="update_user")
    @auth_required
    @karyawan_required
    def update_user(user_id: int):
        body = json_body()
        data = container.user_service.update_user(
            user_id,
            name=body.get("name"),
            email=body.get("email"),
            role=body.get("role"),
            username=body.get("username"),
        )
        return success(data, message="Pengguna berhasil diubah")

    @app.route(f"{API_PREFIX}/users/<int:user_id>", methods=["DELETE"], endpoint="delete_user")
    @auth_required
    @karyawan_required
    def delete_user(user_id: int):
        container.user_service.delete_user(user_id)
        return success(message="Pengguna berhasil dihapus")
