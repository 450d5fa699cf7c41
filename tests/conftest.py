"""Shared fixtures: an in-memory stand-in for the Wix Contacts API."""
from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional

import pytest

from contacts_proxy.errors import UpstreamError


class FakeWixClient:
    """Mimics the Wix Contacts v4 endpoints the proxy uses.

    Records every call and enforces revisions on PATCH the way Wix does,
    answering 409 when the supplied revision is not the stored one.
    """

    def __init__(self, contacts: Optional[List[Dict[str, Any]]] = None) -> None:
        self.contacts: Dict[str, Dict[str, Any]] = {}
        self.calls: List[Dict[str, Any]] = []
        self._next_id = 1
        for doc in contacts or []:
            self.contacts[doc["_id"]] = copy.deepcopy(doc)

    def call(self, path, method="GET", *, body=None, params=None):
        self.calls.append(
            {"path": path, "method": method, "body": body, "params": params}
        )
        if method == "POST" and path.endswith("/query"):
            limit = (body or {}).get("paging", {}).get("limit")
            docs = list(self.contacts.values())[:limit]
            return {"contacts": copy.deepcopy(docs)}
        if method == "POST":
            contact_id = f"c-{self._next_id}"
            self._next_id += 1
            doc = {"_id": contact_id, "revision": 1, "info": copy.deepcopy(body["info"])}
            self.contacts[contact_id] = doc
            return {"contact": copy.deepcopy(doc)}

        contact_id = path.rsplit("/", 1)[-1]
        doc = self.contacts.get(contact_id)
        if doc is None:
            raise UpstreamError(
                "Contact not found",
                status=404,
                details={"message": "Contact not found"},
            )
        if method == "PATCH":
            if str(doc["revision"]) != str((params or {}).get("revision")):
                raise UpstreamError(
                    "Revision mismatch",
                    status=409,
                    details={
                        "message": "Revision mismatch",
                        "details": {
                            "applicationError": {"code": "REVISION_MISMATCH"}
                        },
                    },
                )
            info = doc.setdefault("info", {})
            for key, value in (body or {}).get("info", {}).items():
                if key == "name":
                    info.setdefault("name", {}).update(value)
                else:
                    info[key] = value
            doc["revision"] = int(doc["revision"]) + 1
            return {"contact": copy.deepcopy(doc)}
        if method == "DELETE":
            del self.contacts[contact_id]
            return {}
        raise AssertionError(f"Unexpected call {method} {path}")


@pytest.fixture
def ana_document():
    return {
        "_id": "1",
        "revision": "3",
        "info": {"name": {"first": "Ana"}},
        "primaryEmail": {"email": "a@x.com"},
    }


@pytest.fixture
def fake_wix(ana_document):
    return FakeWixClient(
        [
            ana_document,
            {
                "_id": "2",
                "revision": 7,
                "info": {
                    "name": {"first": "Bruno", "last": "Diaz"},
                    "emails": {"items": [{"email": "bruno@example.com"}]},
                },
            },
            {
                "_id": "3",
                "revision": 2,
                "primaryInfo": {"firstName": "Carla", "email": "anabel@example.com"},
                "info": {"name": {"last": "Anaya"}},
            },
        ]
    )
