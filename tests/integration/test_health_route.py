def test_health_reports_loaded_providers(client):
    res = client.get("/health")

    assert res.status_code == 200
    assert res.json() == {"status": "ok", "providers_loaded": True}


def test_health_with_empty_table(client, db_session):
    from app.models.provider import Provider

    db_session.query(Provider).delete()
    db_session.commit()

    res = client.get("/health")

    assert res.json()["providers_loaded"] is False
