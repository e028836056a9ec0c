from __future__ import annotations

import pytest

from cumulocity_client.domain.entities import Application, ApplicationBinaries
from cumulocity_client.infrastructure.gateways import ApplicationBinariesApi

ERROR_TYPE = "application/vnd.com.nsn.cumulocity.error+json"


@pytest.mark.asyncio
async def test_get_application_attachments(api_pipeline, transport) -> None:
    transport.respond(
        200,
        json_body={
            "self": "https://t100.example.com/application/applications/7/binaries",
            "attachments": [{"id": "b1", "name": "app-1.0.zip", "length": 1024}],
        },
    )

    binaries = await ApplicationBinariesApi(api_pipeline).get_application_attachments("7")

    assert isinstance(binaries, ApplicationBinaries)
    assert binaries.attachments[0].id == "b1"
    assert transport.last.url.path == "/application/applications/7/binaries"
    assert transport.last.headers["Accept"] == (
        f"{ERROR_TYPE}, application/vnd.com.nsn.cumulocity.applicationbinaries+json, "
        "application/json"
    )


@pytest.mark.asyncio
async def test_upload_application_attachment_is_multipart(api_pipeline, transport) -> None:
    transport.respond(201, json_body={"id": "7", "name": "my-app"})

    application = await ApplicationBinariesApi(api_pipeline).upload_application_attachment(
        b"PK\x03\x04zip", "7"
    )

    assert isinstance(application, Application)
    assert application.name == "my-app"
    request = transport.last
    assert request.method == "POST"
    assert request.headers["Content-Type"].startswith("multipart/form-data; boundary=")
    assert b'name="file"; filename="application.zip"' in request.content
    assert b"Content-Type: application/zip" in request.content
    assert b"PK\x03\x04zip" in request.content


@pytest.mark.asyncio
async def test_get_application_attachment_returns_bytes(api_pipeline, transport) -> None:
    transport.respond(200, content=b"PK\x03\x04binary")

    content = await ApplicationBinariesApi(api_pipeline).get_application_attachment(
        "7", "b1"
    )

    assert content == b"PK\x03\x04binary"
    assert transport.last.url.path == "/application/applications/7/binaries/b1"
    assert "application/zip" in transport.last.headers["Accept"]


@pytest.mark.asyncio
async def test_delete_application_attachment(api_pipeline, transport) -> None:
    transport.respond(204)

    result = await ApplicationBinariesApi(api_pipeline).delete_application_attachment(
        "7", "b1"
    )

    assert result is None
    assert transport.last.method == "DELETE"
