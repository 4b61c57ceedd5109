import logging

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from apptemplate.app import create_app, main
from apptemplate.config import AllConfig, AppConfig
from apptemplate.database import Connection
from apptemplate.models import Base, TestJoinTable, TestTable


@pytest.fixture
def connection(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'app.db'}")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        session.add_all(
            [
                TestTable(id=1, name="first"),
                TestTable(id=2, name="second"),
                TestJoinTable(id=10, id_master=1, is_detail="yes"),
            ]
        )
        session.commit()
    yield Connection(mysql=engine)
    engine.dispose()


def _client(connection, run_mode=""):
    conf = AllConfig(app_config=AppConfig(run_mode=run_mode))
    app = create_app(conf, connection, logging.getLogger("test-app"))
    return app.test_client()


def test_list_endpoint(connection):
    resp = _client(connection).get("/")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["message"] == "HALO"
    assert sorted((d["id"], d["name"]) for d in body["data"]) == [(1, "first"), (2, "second")]


def test_detail_endpoint(connection):
    resp = _client(connection).get("/detail?id=1")
    assert resp.status_code == 400
    assert resp.get_json() == {
        "data": {"id": 1, "name": "first", "detail": {"id": 10, "isDetail": "yes"}},
        "message": "SUCCESS",
    }


def test_detail_invalid_query(connection):
    resp = _client(connection).get("/detail?id=abc")
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Invalid Query Parameters "


def test_detail_missing_record_recovers_with_500(connection):
    resp = _client(connection).get("/detail?id=99")
    assert resp.status_code == 500
    assert resp.data == b""


def test_detail_without_join_row_recovers_with_500(connection):
    resp = _client(connection).get("/detail?id=2")
    assert resp.status_code == 500


def test_cors_in_development(connection):
    client = _client(connection, run_mode="development")
    preflight = client.options("/")
    assert preflight.status_code == 204
    assert preflight.headers["Access-Control-Allow-Origin"] == "*"
    resp = client.get("/")
    assert resp.headers["Access-Control-Allow-Methods"] == "POST, OPTIONS, GET, PUT, DELETE"


def test_no_cors_outside_development(connection):
    resp = _client(connection, run_mode="production").get("/")
    assert resp.status_code == 200
    assert "Access-Control-Allow-Origin" not in resp.headers


def test_main_requires_env_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        main([])