"""
Fauna API: Resource Route Tests
================================

List/create/update/delete for especies, usuarios and avistamientos against
the in-memory database, plus the fixed error messages on store failure.
"""

import bcrypt
import pytest
from sqlalchemy import select

from fauna_api.models.usuario import Usuario

JAGUAR = {
    "nombre_cientifico": "Panthera onca",
    "nombre_comun": "Jaguar",
    "descripcion": "Felino de gran tamaño",
    "estado_conservacion": "Casi amenazado",
    "habitat": "Selva tropical",
}


class TestEspecies:

    @pytest.mark.asyncio
    async def test_create_then_list(self, test_client, auth_headers):
        """The listed row carries the same fields as the create response."""
        created = await test_client.post("/api/especies", json=JAGUAR)
        assert created.status_code == 200
        row = created.json()
        assert isinstance(row["id"], int)
        assert {k: row[k] for k in JAGUAR} == JAGUAR

        listed = await test_client.get("/api/especies", headers=auth_headers)
        assert listed.json() == [row]

    @pytest.mark.asyncio
    async def test_update_overwrites_every_field(self, test_client):
        row = (await test_client.post("/api/especies", json=JAGUAR)).json()

        response = await test_client.put(f"/api/especies/{row['id']}", json={"nombre_comun": "Yaguar"})

        assert response.status_code == 200
        assert response.json() == {
            "id": row["id"],
            "nombre_cientifico": None,
            "nombre_comun": "Yaguar",
            "descripcion": None,
            "estado_conservacion": None,
            "habitat": None,
        }

    @pytest.mark.asyncio
    async def test_update_missing_id_returns_null(self, test_client):
        response = await test_client.put("/api/especies/999", json=JAGUAR)
        assert response.status_code == 200
        assert response.json() is None

    @pytest.mark.asyncio
    async def test_delete_is_idempotent(self, test_client, auth_headers):
        row = (await test_client.post("/api/especies", json=JAGUAR)).json()

        first = await test_client.delete(f"/api/especies/{row['id']}")
        second = await test_client.delete(f"/api/especies/{row['id']}")

        assert first.status_code == second.status_code == 200
        assert first.json() == second.json() == {"message": "Especie eliminada correctamente"}
        assert (await test_client.get("/api/especies", headers=auth_headers)).json() == []

    @pytest.mark.asyncio
    async def test_non_numeric_id(self, test_client):
        """The id reaches the store, which rejects it with the route's message."""
        response = await test_client.delete("/api/especies/abc")
        assert response.status_code == 500
        assert response.json() == {"error": "Error al eliminar especie con ID abc"}

    @pytest.mark.asyncio
    async def test_non_numeric_id_on_update(self, test_client):
        response = await test_client.put("/api/especies/abc", json=JAGUAR)
        assert response.status_code == 500
        assert response.json() == {"error": "Error al actualizar especie con ID abc"}

    @pytest.mark.asyncio
    async def test_numeric_value_stored_as_text(self, test_client):
        response = await test_client.post("/api/especies", json={"nombre_comun": 123})
        assert response.status_code == 200
        assert response.json()["nombre_comun"] == "123"

    @pytest.mark.asyncio
    async def test_structured_value_rejected_by_store(self, test_client):
        response = await test_client.post("/api/especies", json={"nombre_comun": {"es": "Jaguar"}})
        assert response.status_code == 500
        assert response.json() == {"error": "Error al crear especie"}

    @pytest.mark.asyncio
    async def test_body_not_an_object(self, test_client):
        response = await test_client.post("/api/especies", json=["Jaguar"])
        assert response.status_code == 400
        assert response.json() == {"error": "Cuerpo de la solicitud inválido"}

    @pytest.mark.asyncio
    async def test_unknown_fields_ignored(self, test_client):
        response = await test_client.post("/api/especies", json={**JAGUAR, "color": "amarillo"})
        assert response.status_code == 200
        assert "color" not in response.json()


class TestUsuarios:

    @pytest.mark.asyncio
    async def test_credential_never_returned(self, test_client):
        created = await test_client.post(
            "/api/usuarios",
            json={"nombre": "Ana", "email": "ana@example.org", "contraseña": "secreto"},
        )
        assert created.status_code == 200
        assert set(created.json()) == {"id", "nombre", "email", "fecha_registro"}
        assert created.json()["fecha_registro"] is not None

        listed = await test_client.get("/api/usuarios")
        assert listed.status_code == 200
        assert all("contraseña" not in row for row in listed.json())

        updated = await test_client.put(
            f"/api/usuarios/{created.json()['id']}",
            json={"nombre": "Ana M.", "email": "ana@example.org", "contraseña": "nuevo"},
        )
        assert set(updated.json()) == {"id", "nombre", "email", "fecha_registro"}

    @pytest.mark.asyncio
    async def test_credential_stored_as_bcrypt(self, test_client, db_session_factory):
        await test_client.post(
            "/api/usuarios",
            json={"nombre": "Ana", "email": "ana@example.org", "contraseña": "secreto"},
        )

        async with db_session_factory() as session:
            stored = (await session.execute(select(Usuario.contrasena))).scalar_one()

        assert stored != "secreto"
        assert bcrypt.checkpw(b"secreto", stored.encode("utf-8"))

    @pytest.mark.asyncio
    async def test_update_rehashes_credential(self, test_client):
        row = (
            await test_client.post(
                "/api/usuarios",
                json={"nombre": "Ana", "email": "ana@example.org", "contraseña": "secreto"},
            )
        ).json()

        await test_client.put(
            f"/api/usuarios/{row['id']}",
            json={"nombre": "Ana", "email": "ana@example.org", "contraseña": "nuevo"},
        )
        login = await test_client.post(
            "/api/login", json={"email": "ana@example.org", "contraseña": "nuevo"}
        )
        assert login.status_code == 200

    @pytest.mark.asyncio
    async def test_create_without_credential_fails(self, test_client):
        response = await test_client.post("/api/usuarios", json={"nombre": "Ana"})
        assert response.status_code == 500
        assert response.json() == {"error": "Error al crear usuario"}

    @pytest.mark.asyncio
    async def test_delete_message(self, test_client):
        response = await test_client.delete("/api/usuarios/42")
        assert response.json() == {"message": "Usuario eliminado correctamente"}


class TestAvistamientos:

    @pytest.mark.asyncio
    async def test_create_list_update(self, test_client):
        especie = (await test_client.post("/api/especies", json=JAGUAR)).json()
        body = {
            "id_especie": especie["id"],
            "id_usuario": None,
            "fecha_avistamiento": "2024-03-10",
            "ubicacion": "Calakmul",
            "imagen_url": "https://img.example.org/1.jpg",
            "comentarios": "Cerca del río",
        }

        created = (await test_client.post("/api/avistamientos", json=body)).json()
        assert {k: created[k] for k in body} == body

        listed = await test_client.get("/api/avistamientos")
        assert listed.json() == [created]

        updated = await test_client.put(
            f"/api/avistamientos/{created['id']}", json={**body, "ubicacion": "Sian Ka'an"}
        )
        assert updated.json()["ubicacion"] == "Sian Ka'an"
        assert updated.json()["fecha_avistamiento"] == "2024-03-10"

    @pytest.mark.asyncio
    async def test_delete_message(self, test_client):
        response = await test_client.delete("/api/avistamientos/1")
        assert response.status_code == 200
        assert response.json() == {"message": "Avistamiento eliminado correctamente"}

    @pytest.mark.asyncio
    async def test_update_missing_id_returns_null(self, test_client):
        response = await test_client.put("/api/avistamientos/5", json={"ubicacion": "x"})
        assert response.json() is None

    @pytest.mark.asyncio
    async def test_foreign_key_as_text(self, test_client):
        especie = (await test_client.post("/api/especies", json=JAGUAR)).json()

        response = await test_client.post(
            "/api/avistamientos",
            json={"id_especie": str(especie["id"]), "fecha_avistamiento": "2024-03-10"},
        )

        assert response.status_code == 200
        assert response.json()["id_especie"] == especie["id"]

    @pytest.mark.asyncio
    async def test_invalid_date_rejected_by_store(self, test_client):
        created = (
            await test_client.post("/api/avistamientos", json={"ubicacion": "Calakmul"})
        ).json()

        response = await test_client.put(
            f"/api/avistamientos/{created['id']}",
            json={"fecha_avistamiento": "not-a-date", "ubicacion": "Calakmul"},
        )

        assert response.status_code == 500
        assert response.json() == {
            "error": f"Error al actualizar avistamiento con ID {created['id']}"
        }


class TestStoreFailures:
    """Every route reports its own fixed message and nothing else."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method, path, expected",
        [
            ("get", "/api/usuarios", "Error al obtener usuarios"),
            ("get", "/api/avistamientos", "Error al obtener avistamientos"),
            ("post", "/api/especies", "Error al crear especie"),
            ("post", "/api/avistamientos", "Error al crear avistamiento"),
            ("put", "/api/especies/3", "Error al actualizar especie con ID 3"),
            ("put", "/api/usuarios/4", "Error al actualizar usuario con ID 4"),
            ("delete", "/api/especies/5", "Error al eliminar especie con ID 5"),
            ("delete", "/api/avistamientos/6", "Error al eliminar avistamiento con ID 6"),
        ],
    )
    async def test_fixed_messages(self, failing_client, method, path, expected):
        kwargs = {"json": {}} if method in ("post", "put") else {}
        response = await getattr(failing_client, method)(path, **kwargs)
        assert response.status_code == 500
        assert response.json() == {"error": expected}

    @pytest.mark.asyncio
    async def test_gated_list_failure(self, failing_client, auth_headers):
        response = await failing_client.get("/api/especies", headers=auth_headers)
        assert response.status_code == 500
        assert response.json() == {"error": "Error al obtener especies"}
