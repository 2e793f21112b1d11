"""
Push notification helpers for code that sends FCM messages to the web app.

Nothing in the functions sends notifications on its own; these build the
payloads so a sender (a future function or an operator script) renders the
same way the service worker does.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple

from firebase_admin import messaging

from . import config


def notification_from_payload(payload: Mapping[str, Any]) -> Tuple[Optional[str], Dict[str, Any]]:
    """
    Title and display options for an incoming push payload, as the web
    service worker (web/firebase-messaging-sw.js) shows it.
    """
    notification = payload.get("notification") or {}
    options = {
        "body": notification.get("body"),
        "icon": config.NOTIFICATION_ICON,
    }
    return notification.get("title"), options


def build_webpush_message(
    token: str,
    title: str,
    body: str,
    data: Optional[Mapping[str, Any]] = None,
) -> messaging.Message:
    return messaging.Message(
        token=token,
        notification=messaging.Notification(title=title, body=body),
        webpush=messaging.WebpushConfig(
            notification=messaging.WebpushNotification(
                title=title,
                body=body,
                icon=config.NOTIFICATION_ICON,
            ),
        ),
        # FCM only accepts string data values
        data={str(k): str(v) for k, v in (data or {}).items()} or None,
    )
