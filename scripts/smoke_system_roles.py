#!/usr/bin/env python3
"""Smoke run of the system role API against a live deployment.

Creates a role, lists, soft-deletes it and checks it is still readable.

Usage:
    export API_URL=http://localhost:8000
    # optional, when the API verifies tokens:
    export KEYCLOAK_URL=... KEYCLOAK_REALM=... KEYCLOAK_CLIENT_ID=... KEYCLOAK_CLIENT_SECRET=...
    export SMOKE_USER=... SMOKE_PASSWORD=...
    uv run python scripts/smoke_system_roles.py [--name Admin]
"""
from __future__ import annotations

import argparse
import os
import sys
import uuid

import httpx


def get_token(
    keycloak_url: str,
    realm: str,
    client_id: str,
    client_secret: str,
    username: str,
    password: str,
) -> str:
    url = f"{keycloak_url.rstrip('/')}/realms/{realm}/protocol/openid-connect/token"
    r = httpx.post(
        url,
        data={
            "grant_type": "password",
            "client_id": client_id,
            "client_secret": client_secret,
            "username": username,
            "password": password,
        },
        headers={"Content-Type": "application/x-www-form-urlencoded"},
        timeout=30.0,
    )
    r.raise_for_status()
    return r.json()["access_token"]


def expect(r: httpx.Response, status: int) -> dict:
    body = r.json()
    if r.status_code != status:
        print(f"FAIL {r.request.method} {r.request.url}: {r.status_code} {body}")
        sys.exit(1)
    print(f"ok   {r.request.method} {r.request.url.path} -> {r.status_code}")
    return body


def main() -> int:
    parser = argparse.ArgumentParser(description="System role API smoke run")
    parser.add_argument("--name", type=str, default=None, help="Role name (default: random)")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")
    headers = {"Content-Type": "application/json"}
    if os.environ.get("KEYCLOAK_CLIENT_SECRET"):
        token = get_token(
            os.environ.get("KEYCLOAK_URL", "http://localhost:8080"),
            os.environ.get("KEYCLOAK_REALM", "sysroles"),
            os.environ.get("KEYCLOAK_CLIENT_ID", "sysroles-api"),
            os.environ["KEYCLOAK_CLIENT_SECRET"],
            os.environ.get("SMOKE_USER", "testuser"),
            os.environ.get("SMOKE_PASSWORD", "testpass"),
        )
        headers["Authorization"] = f"Bearer {token}"

    name = args.name or f"smoke-{uuid.uuid4().hex[:8]}"
    with httpx.Client(base_url=api_url, headers=headers, timeout=30.0) as client:
        body = expect(client.post("/system-roles", json={"name": name}), 201)
        role_id = body["data"]["systemRole"]["id"]

        expect(client.post("/system-roles", json={"name": name}), 409)

        body = expect(client.get("/system-roles"), 200)
        print(f"     {body['data']['totalSystemRoles']} role(s) listed")

        body = expect(client.delete(f"/system-roles/{role_id}"), 200)
        assert body["data"]["systemRole"] == role_id

        body = expect(client.get(f"/system-roles/{role_id}"), 200)
        assert body["data"]["systemRole"]["isDeleted"] is True

        expect(client.get("/system-roles/not-a-valid-id"), 404)

    print("Smoke run passed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
