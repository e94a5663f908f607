from firebase_admin import exceptions as firebase_exceptions


def test_send_notification_echoes_receipt(client, fake_fcm):
    response = client.post(
        "/send-notification", json={"token": "T1", "title": "Hi", "body": "B"}
    )

    assert response.status_code == 200
    assert response.json() == {"message": "Notification sent", "response": "msg-id-1"}

    assert len(fake_fcm.messages) == 1
    message = fake_fcm.messages[0]
    assert message.token == "T1"
    assert message.notification.title == "Hi"
    assert message.notification.body == "B"
    assert message.data is None


def test_send_notification_accepts_destination_alias(client, fake_fcm):
    response = client.post(
        "/send-notification", json={"destination": "T2", "title": "Hi", "body": "B"}
    )

    assert response.status_code == 200
    assert fake_fcm.messages[0].token == "T2"


def test_send_notification_forwards_data(client, fake_fcm):
    response = client.post(
        "/send-notification",
        json={"token": "T1", "title": "Hi", "body": "B", "data": {"screen": "inbox"}},
    )

    assert response.status_code == 200
    assert fake_fcm.messages[0].data == {"screen": "inbox"}


def test_send_notification_platform_failure(client, fake_fcm):
    fake_fcm.error = firebase_exceptions.InvalidArgumentError(
        "The registration token is not a valid FCM registration token"
    )

    response = client.post(
        "/send-notification", json={"token": "bad", "title": "Hi", "body": "B"}
    )

    assert response.status_code == 500
    assert response.json() == {
        "error": "The registration token is not a valid FCM registration token"
    }
    assert len(fake_fcm.messages) == 1


def test_send_notification_uninitialized_platform(client, fake_fcm):
    fake_fcm.error = ValueError("The default Firebase app does not exist.")

    response = client.post(
        "/send-notification", json={"token": "T1", "title": "Hi", "body": "B"}
    )

    assert response.status_code == 500
    assert response.json()["error"] == "The default Firebase app does not exist."


def test_send_notification_missing_field(client, fake_fcm):
    response = client.post("/send-notification", json={"token": "T1", "body": "B"})

    assert response.status_code == 400
    assert "title" in response.json()["error"]
    assert fake_fcm.messages == []


def test_send_notification_empty_token(client, fake_fcm):
    response = client.post("/send-notification", json={"token": "", "title": "Hi", "body": "B"})

    assert response.status_code == 400
    assert fake_fcm.messages == []


def test_send_notification_is_live_by_default(client, fake_fcm):
    client.post("/send-notification", json={"token": "T1", "title": "Hi", "body": "B"})

    assert fake_fcm.dry_runs == [False]


def test_send_notification_forwards_dry_run(client, fake_fcm, monkeypatch):
    from app.services.notification import notification_service

    monkeypatch.setattr(notification_service, "dry_run", True)

    response = client.post(
        "/send-notification", json={"token": "T1", "title": "Hi", "body": "B"}
    )

    assert response.status_code == 200
    assert fake_fcm.dry_runs == [True]
