import json


def _load(client, dataset):
    return client.post("/api/dataset/load", json={"content": json.dumps(dataset)})


class TestDatasetEndpoints:
    def test_nothing_loaded(self, client):
        r = client.get("/api/dataset/")
        assert r.status_code == 200
        assert r.json() == {"loaded": False, "data": None, "error": None}
        assert client.get("/api/dataset/export").status_code == 404

    def test_load_and_export_round_trip(self, client, sample_dataset):
        r = _load(client, sample_dataset)
        assert r.status_code == 200
        assert r.json()["loaded"] is True

        exported = client.get("/api/dataset/export").json()
        assert exported["data"] == sample_dataset
        assert "exportDate" in exported

        r = client.post("/api/dataset/load", json={"content": json.dumps(exported)})
        assert r.status_code == 200
        assert client.get("/api/dataset/").json()["data"] == sample_dataset

    def test_parse_error_keeps_dataset(self, client, sample_dataset):
        _load(client, sample_dataset)
        r = client.post("/api/dataset/load", json={"content": "{nope"})
        assert r.status_code == 400
        body = client.get("/api/dataset/").json()
        assert body["data"] == sample_dataset
        assert body["error"].startswith("Invalid JSON")

    def test_stored_restore_and_reset(self, client, state, sample_dataset):
        _load(client, sample_dataset)
        assert client.get("/api/dataset/stored").json() == {"exists": True}

        state.store._snapshot = None
        r = client.post("/api/dataset/restore")
        assert r.json() == {"restored": True, "loaded": True}

        assert client.post("/api/dataset/reset").status_code == 204
        assert client.get("/api/dataset/stored").json() == {"exists": False}
        assert client.get("/api/dataset/").json()["loaded"] is False

    def test_new_and_files(self, client):
        client.post("/api/dataset/new")
        files = client.get("/api/dataset/files").json()
        assert files["en/recipes.json"] == []
        assert files["nl/about.json"] == {}


class TestRecordEndpoints:
    def test_list_record_types(self, client):
        body = client.get("/api/records/").json()
        assert body["locales"] == ["en", "de", "nl"]
        names = [rt["name"] for rt in body["record_types"]]
        assert "questions" in names and "links" in names

    def test_put_and_get_locale_value(self, client, sample_dataset):
        _load(client, sample_dataset)
        r = client.put("/api/records/links/nl", json={"phone": "555"})
        assert r.status_code == 200
        assert r.json()["data"]["nl"] == {"phone": "555"}
        assert client.get("/api/records/links/nl").json() == {"phone": "555"}
        assert client.get("/api/records/links/de").json() == sample_dataset["links"]["de"]

    def test_unknown_locale_and_type(self, client, sample_dataset):
        _load(client, sample_dataset)
        assert client.get("/api/records/cities/fr").status_code == 422
        assert client.get("/api/records/boats/en").status_code == 404

    def test_mutations_without_data_are_noops(self, client):
        r = client.post("/api/records/cities", json={"record": {"id": 1, "name": "X"}})
        assert r.status_code == 200
        assert r.json() == {"record_type": "cities", "loaded": False, "data": None}

    def test_create_and_delete_by_key(self, client, sample_dataset):
        _load(client, sample_dataset)
        next_id = client.get("/api/records/points/next-id").json()["next_id"]
        assert next_id == 1

        point = {"id": next_id, "name": "Dock", "type": "harbour", "latitude": 1.5, "longitude": 2.5, "cityId": 1, "description": "Here"}
        r = client.post("/api/records/points", json={"source_locale": "en", "record": point})
        data = r.json()["data"]
        assert data["en"] == [point]
        assert data["de"] == [{"id": 1, "name": "Dock", "type": "", "latitude": 1.5, "longitude": 2.5, "cityId": 1, "description": ""}]

        validation = client.get("/api/records/points/validation").json()
        assert validation["incomplete_items"] == [
            {"id": 1, "missing_fields": ["de.type", "de.description", "nl.type", "nl.description"]}
        ]

        r = client.delete("/api/records/points/by-key/1")
        assert r.json()["data"] == {"en": [], "de": [], "nl": []}

    def test_create_singleton_rejected(self, client, sample_dataset):
        _load(client, sample_dataset)
        r = client.post("/api/records/about", json={"record": {"history": "x"}})
        assert r.status_code == 400

    def test_delete_by_index(self, client, sample_dataset):
        _load(client, sample_dataset)
        assert client.delete("/api/records/questions/by-key/0").status_code == 400
        data = client.delete("/api/records/questions/by-index/0").json()["data"]
        assert data["en"] == [{"questiontext": "Q2", "answertext": "A2"}]
        assert data["nl"] == []

    def test_validation_all(self, client, sample_dataset):
        _load(client, sample_dataset)
        body = client.get("/api/records/validation").json()
        assert body["recipes"]["has_incomplete_translations"] is True
        assert body["cabins"]["has_incomplete_translations"] is False


class TestCollapseEndpoints:
    def test_collapse_flow(self, client):
        assert client.get("/api/collapse/cities").json() == {"view": "cities", "collapsed": ["*"]}
        r = client.post("/api/collapse/cities/toggle", json={"item_id": "5", "all_ids": ["1", "2", "5"]})
        assert r.json()["collapsed"] == ["1", "2"]
        assert client.post("/api/collapse/cities/expand-all").json()["collapsed"] == []
        assert client.post("/api/collapse/cities/collapse-all", json={}).json()["collapsed"] == ["*"]
        # views are independent
        assert client.get("/api/collapse/recipes").json()["collapsed"] == ["*"]
