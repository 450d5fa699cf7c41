"""Tests for mapping Wix contact documents onto Contact."""
from __future__ import annotations

import pytest

from contacts_proxy.contacts.normalize import (
    Contact,
    extract_documents,
    lookup,
    normalize,
    resolve,
    EMAIL_PATHS,
    REVISION_PATHS,
)


class TestNormalize:
    """Tests for normalize()"""

    def test_query_shape(self, ana_document):
        """The documented list scenario maps to the expected canonical value."""
        contact = normalize(ana_document)

        assert contact.to_dict(include_raw=False) == {
            "id": "1",
            "revision": "3",
            "firstName": "Ana",
            "lastName": "",
            "email": "a@x.com",
        }
        assert contact.raw == ana_document

    def test_wrapped_document_matches_unwrapped(self, ana_document):
        """A {"contact": {...}} wrapper is stripped before resolution."""
        assert normalize({"contact": ana_document}) == normalize(ana_document)

    @pytest.mark.parametrize(
        "document",
        [
            {},
            {"info": {}},
            {"info": {"name": None, "emails": {"items": []}}},
            {"primaryEmail": {}, "primaryInfo": None},
            {"contact": {}},
        ],
    )
    def test_missing_fields_default_to_empty_strings(self, document):
        """Unresolved fields become "" and nothing raises."""
        contact = normalize(document)

        for value in contact.to_dict(include_raw=False).values():
            assert value == ""

    @pytest.mark.parametrize("document", [None, "oops", 42, ["a"]])
    def test_non_mapping_input_never_raises(self, document):
        """Garbage input yields an empty Contact."""
        assert normalize(document) == Contact()

    def test_id_precedence(self):
        """_id wins over id, which wins over contactId."""
        assert normalize({"_id": "a", "id": "b", "contactId": "c"}).id == "a"
        assert normalize({"id": "b", "contactId": "c"}).id == "b"
        assert normalize({"contactId": "c"}).id == "c"

    def test_revision_precedence(self):
        """Top-level revision wins, then a nested contact revision, then revisionNumber."""
        assert normalize({"revision": 5, "revisionNumber": 9}).revision == "5"
        doc = {"_id": "x", "contact": {"revision": 6}, "revisionNumber": 9}
        assert resolve(doc, REVISION_PATHS) == "6"
        assert normalize({"revisionNumber": 9}).revision == "9"

    def test_first_name_variants(self):
        """first, then firstName, then the flattened primaryInfo firstName."""
        assert normalize({"info": {"name": {"first": "A", "firstName": "B"}}}).first_name == "A"
        assert normalize({"info": {"name": {"firstName": "B"}}}).first_name == "B"
        assert normalize({"primaryInfo": {"firstName": "C"}}).first_name == "C"

    def test_last_name_variants(self):
        """last wins over lastName."""
        assert normalize({"info": {"name": {"last": "L", "lastName": "M"}}}).last_name == "L"
        assert normalize({"info": {"name": {"lastName": "M"}}}).last_name == "M"

    def test_email_precedence(self):
        """primaryEmail, then the first emails item, then primaryInfo email."""
        doc = {
            "primaryEmail": {"email": "p@x.com"},
            "info": {"emails": {"items": [{"email": "i@x.com"}, {"email": "j@x.com"}]}},
            "primaryInfo": {"email": "f@x.com"},
        }
        assert resolve(doc, EMAIL_PATHS) == "p@x.com"
        del doc["primaryEmail"]
        assert resolve(doc, EMAIL_PATHS) == "i@x.com"
        doc["info"]["emails"]["items"] = []
        assert resolve(doc, EMAIL_PATHS) == "f@x.com"

    def test_empty_string_falls_through(self):
        """An empty value on an earlier path does not mask a later one."""
        doc = {"info": {"name": {"first": "", "firstName": "Bea"}}}
        assert normalize(doc).first_name == "Bea"

    def test_serialized_keys_are_camel_case(self, ana_document):
        """to_dict exposes the API field names plus raw."""
        data = normalize(ana_document).to_dict()
        assert set(data) == {"id", "revision", "firstName", "lastName", "email", "raw"}


class TestLookup:
    """Tests for lookup()"""

    def test_list_index_out_of_range(self):
        assert lookup({"items": []}, ("items", 0, "email")) is None

    def test_index_on_mapping_is_missing(self):
        assert lookup({"items": {"0": "x"}}, ("items", 0)) is None


class TestExtractDocuments:
    """Tests for extract_documents()"""

    def test_prefers_contacts_key(self):
        assert extract_documents({"contacts": [1], "items": [2]}) == [1]

    def test_falls_back_to_items(self):
        assert extract_documents({"items": [2]}) == [2]

    @pytest.mark.parametrize("response", [None, {}, {"raw": "<html>"}, []])
    def test_missing_list_is_empty(self, response):
        assert extract_documents(response) == []
