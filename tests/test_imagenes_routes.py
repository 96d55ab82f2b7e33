"""
Fauna API: Sighting Image Route Tests
======================================

Images are always addressed through their parent sighting.
"""

import pytest


async def _sighting(client):
    response = await client.post("/api/avistamientos", json={"ubicacion": "Calakmul"})
    return response.json()["id"]


class TestImagenes:

    @pytest.mark.asyncio
    async def test_create_binds_parent_from_path(self, test_client):
        aid = await _sighting(test_client)

        response = await test_client.post(
            f"/api/avistamientos/{aid}/imagenes",
            json={"url": "https://img.example.org/a.jpg", "metadatos": {"camara": "X100", "iso": 400}},
        )

        assert response.status_code == 200
        row = response.json()
        assert row["id_avistamiento"] == aid
        assert row["url"] == "https://img.example.org/a.jpg"
        assert row["metadatos"] == {"camara": "X100", "iso": 400}

    @pytest.mark.asyncio
    async def test_list_scoped_to_parent(self, test_client):
        first = await _sighting(test_client)
        second = await _sighting(test_client)
        await test_client.post(f"/api/avistamientos/{first}/imagenes", json={"url": "a"})
        await test_client.post(f"/api/avistamientos/{second}/imagenes", json={"url": "b"})

        listed = await test_client.get(f"/api/avistamientos/{first}/imagenes")

        assert [row["url"] for row in listed.json()] == ["a"]

    @pytest.mark.asyncio
    async def test_list_empty_for_unknown_parent(self, test_client):
        response = await test_client.get("/api/avistamientos/12345/imagenes")
        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_delete_requires_matching_parent(self, test_client):
        """A mismatched parent id reports success but leaves the image in place."""
        owner = await _sighting(test_client)
        other = await _sighting(test_client)
        image = (await test_client.post(f"/api/avistamientos/{owner}/imagenes", json={"url": "a"})).json()

        mismatched = await test_client.delete(f"/api/avistamientos/{other}/imagenes/{image['id']}")
        assert mismatched.status_code == 200
        assert mismatched.json() == {"message": "Imagen eliminada correctamente"}
        assert len((await test_client.get(f"/api/avistamientos/{owner}/imagenes")).json()) == 1

        matched = await test_client.delete(f"/api/avistamientos/{owner}/imagenes/{image['id']}")
        assert matched.json() == {"message": "Imagen eliminada correctamente"}
        assert (await test_client.get(f"/api/avistamientos/{owner}/imagenes")).json() == []

    @pytest.mark.asyncio
    async def test_store_failures(self, failing_client):
        listed = await failing_client.get("/api/avistamientos/3/imagenes")
        created = await failing_client.post("/api/avistamientos/3/imagenes", json={"url": "a"})
        deleted = await failing_client.delete("/api/avistamientos/3/imagenes/8")

        assert listed.status_code == created.status_code == deleted.status_code == 500
        assert listed.json() == {"error": "Error al obtener imágenes del avistamiento con ID 3"}
        assert created.json() == {"error": "Error al crear imagen para el avistamiento con ID 3"}
        assert deleted.json() == {"error": "Error al eliminar imagen con ID 8 del avistamiento con ID 3"}

    @pytest.mark.asyncio
    async def test_non_numeric_parent_id(self, test_client):
        listed = await test_client.get("/api/avistamientos/abc/imagenes")
        created = await test_client.post("/api/avistamientos/abc/imagenes", json={"url": "a"})

        assert listed.status_code == created.status_code == 500
        assert listed.json() == {"error": "Error al obtener imágenes del avistamiento con ID abc"}
        assert created.json() == {"error": "Error al crear imagen para el avistamiento con ID abc"}
