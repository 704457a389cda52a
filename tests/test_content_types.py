"""Tests for the content_types module."""

from resourcegen.content_types import get_content_type, is_collection_path

_OBJ = {"schema": {"type": "object"}}


def _response(*content_types):
    return {"responses": {"200": {"description": "OK", "content": {ct: _OBJ for ct in content_types}}}}


def _body(*content_types):
    return {"requestBody": {"content": {ct: _OBJ for ct in content_types}}}


class TestDefaults:
    def test_missing_path(self, make_spec):
        assert get_content_type("/api/tasks", "get", make_spec({})) == "application/json"

    def test_missing_operation(self, make_spec):
        spec = make_spec({"/api/tasks": {"get": {}}})
        assert get_content_type("/api/tasks", "post", spec) == "application/json"

    def test_no_content_at_all(self, make_spec):
        spec = make_spec({"/api/tasks/{id}": {"delete": {"responses": {"204": {"description": "Gone"}}}}})
        assert get_content_type("/api/tasks/{id}", "delete", spec) == "application/json"

    def test_empty_request_content_falls_through_to_response(self, make_spec):
        spec = make_spec({"/api/tasks": {"post": {
            "requestBody": {"content": {}},
            **_response("application/ld+json"),
        }}})
        assert get_content_type("/api/tasks", "post", spec) == "application/ld+json"


class TestRequestBody:
    """Request body content types take precedence over responses."""

    def test_merge_patch_for_patch(self, make_spec):
        spec = make_spec({"/api/tasks/{id}": {"patch": _body("application/merge-patch+json")}})
        assert get_content_type("/api/tasks/{id}", "patch", spec) == "application/merge-patch+json"

    def test_merge_patch_wins_over_json(self, make_spec):
        spec = make_spec({"/api/tasks/{id}": {"patch": _body(
            "application/json", "application/ld+json", "application/merge-patch+json",
        )}})
        assert get_content_type("/api/tasks/{id}", "patch", spec) == "application/merge-patch+json"

    def test_merge_patch_ignored_for_put(self, make_spec):
        spec = make_spec({"/api/tasks/{id}": {"put": _body("application/merge-patch+json", "application/json")}})
        assert get_content_type("/api/tasks/{id}", "put", spec) == "application/json"

    def test_prefers_json_over_ld_json(self, make_spec):
        spec = make_spec({"/api/tasks": {"post": _body("application/ld+json", "application/json")}})
        assert get_content_type("/api/tasks", "post", spec) == "application/json"

    def test_ld_json_when_no_json(self, make_spec):
        spec = make_spec({"/api/tasks": {"post": _body("text/plain", "application/ld+json")}})
        assert get_content_type("/api/tasks", "post", spec) == "application/ld+json"

    def test_first_declared_otherwise(self, make_spec):
        spec = make_spec({"/api/files": {"post": _body("multipart/form-data", "text/csv")}})
        assert get_content_type("/api/files", "post", spec) == "multipart/form-data"

    def test_body_beats_response(self, make_spec):
        spec = make_spec({"/api/tasks": {"post": {
            **_body("application/json"),
            **_response("application/ld+json"),
        }}})
        assert get_content_type("/api/tasks", "post", spec) == "application/json"


class TestResponses:
    """Success response content types, by path cardinality."""

    def test_collection_get_prefers_ld_json(self, make_spec):
        spec = make_spec({"/api/tasks": {"get": _response("application/ld+json", "application/json")}})
        assert get_content_type("/api/tasks", "get", spec) == "application/ld+json"

    def test_collection_get_json_only(self, make_spec):
        spec = make_spec({"/api/tasks": {"get": _response("application/json")}})
        assert get_content_type("/api/tasks", "get", spec) == "application/json"

    def test_item_get_prefers_json(self, make_spec):
        spec = make_spec({"/api/tasks/{id}": {"get": _response("application/ld+json", "application/json")}})
        assert get_content_type("/api/tasks/{id}", "get", spec) == "application/json"

    def test_item_get_ld_json_only(self, make_spec):
        spec = make_spec({"/api/tasks/{id}": {"get": _response("application/ld+json")}})
        assert get_content_type("/api/tasks/{id}", "get", spec) == "application/ld+json"

    def test_custom_param_path_counts_as_collection(self, make_spec):
        spec = make_spec({"/api/tasks/{slug}": {"get": _response("application/json", "application/ld+json")}})
        assert get_content_type("/api/tasks/{slug}", "get", spec) == "application/ld+json"

    def test_first_declared_otherwise(self, make_spec):
        spec = make_spec({"/api/reports": {"get": _response("text/csv", "application/xml")}})
        assert get_content_type("/api/reports", "get", spec) == "text/csv"

    def test_delete_with_response_prefers_json(self, make_spec):
        spec = make_spec({"/api/tasks": {"delete": _response("application/ld+json", "application/json")}})
        assert get_content_type("/api/tasks", "delete", spec) == "application/json"

    def test_integer_status_key(self, make_spec):
        """YAML loads an unquoted 200 as an int."""
        spec = make_spec({"/api/tasks": {"get": {
            "responses": {200: {"content": {"application/ld+json": _OBJ}}},
        }}})
        assert get_content_type("/api/tasks", "get", spec) == "application/ld+json"

    def test_only_200_is_consulted(self, make_spec):
        spec = make_spec({"/api/tasks": {"post": {
            "responses": {"201": {"content": {"text/plain": _OBJ}}},
        }}})
        assert get_content_type("/api/tasks", "post", spec) == "application/json"


class TestIsCollectionPath:
    def test_cardinality(self):
        assert is_collection_path("/api/tasks")
        assert is_collection_path("/api/tasks/{slug}")
        assert not is_collection_path("/api/tasks/{id}")
        assert not is_collection_path("/api/tasks/{id}/streak")
