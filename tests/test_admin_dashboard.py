from fleet_app.admin_dashboard import FLASH_KEY, queue_flash, take_flash


def test_flash_message_survives_until_taken():
    session = {}
    queue_flash(session, "Vehicle added.")

    assert session[FLASH_KEY] == "Vehicle added."
    assert take_flash(session) == "Vehicle added."
    # shown once only
    assert take_flash(session) is None
