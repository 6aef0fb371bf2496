"""Utility helpers for sending transactional email notifications via SendGrid."""

from __future__ import annotations

import base64
import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Attachment, Mail

from petdoc.config import get_settings
from petdoc.domain.entities import NotificationContext

from .email_templates import render_email_template

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parents[1] / "static"
CID_PREFIX = "cid:"
# Only these context keys may reference files under STATIC_DIR.
INLINE_IMAGE_KEYS = ("logo_url",)


class EmailDeliveryError(RuntimeError):
    """Raised when SendGrid does not accept a message for delivery."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class InlineImage:
    """Image embedded in the message body and referenced through ``cid:``."""

    content_id: str
    path: Path
    mime_type: str = "image/png"

    def to_attachment(self) -> Attachment:
        encoded = base64.b64encode(self.path.read_bytes()).decode("ascii")
        return Attachment(
            file_content=encoded,
            file_name=self.path.name,
            file_type=self.mime_type,
            disposition="inline",
            content_id=self.content_id,
        )


def _extract_sendgrid_error_details(body: Any) -> str | None:
    """Return a human readable description for a SendGrid error payload."""

    if body in (None, ""):
        return None

    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            return None

    if isinstance(body, str):
        body = body.strip()
        if not body:
            return None
        try:
            parsed = json.loads(body)
        except json.JSONDecodeError:
            return body
    else:
        parsed = body

    if isinstance(parsed, dict):
        errors = parsed.get("errors")
        if isinstance(errors, list):
            messages: list[str] = []
            for item in errors:
                if not isinstance(item, dict):
                    continue
                message = item.get("message")
                help_link = item.get("help")
                if message and help_link:
                    messages.append(f"{message} (help: {help_link})")
                elif message:
                    messages.append(str(message))
            if messages:
                return "; ".join(messages)
        try:
            return json.dumps(parsed)
        except (TypeError, ValueError):
            return None

    if isinstance(parsed, list):
        return "; ".join(str(item) for item in parsed)

    return None


def _describe_failure(status_code: Any, details: str | None) -> str:
    if status_code and details:
        return f"SendGrid API request failed with status {status_code}: {details}"
    if status_code:
        return f"SendGrid API request failed with status {status_code}"
    if details:
        return f"SendGrid API request failed: {details}"
    return "SendGrid API request failed"


def send_email(
    subject: str,
    html_content: str,
    recipient: str,
    *,
    inline_images: Iterable[InlineImage] = (),
) -> bool:
    """Send an email using the configured SendGrid credentials.

    Returns ``False`` without contacting SendGrid when the integration is not
    configured. Raises :class:`EmailDeliveryError` when the request fails or
    SendGrid answers with a non-2xx status.
    """

    settings = get_settings()
    if not (settings.sendgrid_api_key and settings.sendgrid_sender):
        logger.info("SendGrid configuration incomplete; skipping email to %s", recipient)
        return False

    message = Mail(
        from_email=settings.sendgrid_sender,
        to_emails=recipient,
        subject=subject,
        html_content=html_content,
    )
    for image in inline_images:
        message.add_attachment(image.to_attachment())

    try:
        client = SendGridAPIClient(settings.sendgrid_api_key)
        response = client.send(message)
    except Exception as exc:
        status_code = getattr(exc, "status_code", None)
        description = _describe_failure(
            status_code, _extract_sendgrid_error_details(getattr(exc, "body", None))
        )
        logger.error("%s", description)
        raise EmailDeliveryError(description, status_code=status_code) from exc

    status_code = getattr(response, "status_code", None)
    if not isinstance(status_code, int) or not 200 <= status_code < 300:
        details = _extract_sendgrid_error_details(getattr(response, "body", None))
        description = _describe_failure(status_code, details)
        logger.error("%s", description)
        raise EmailDeliveryError(description, status_code=status_code)

    return True


class TemplateEmailSender:
    """Render a Jinja2 e-mail template and deliver it through SendGrid."""

    def __init__(self, static_dir: Path = STATIC_DIR) -> None:
        self._static_dir = static_dir

    def send(
        self,
        to_address: str,
        subject: str,
        template_id: str,
        context: NotificationContext,
    ) -> None:
        html_content = render_email_template(template_id, context)
        send_email(
            subject,
            html_content,
            to_address,
            inline_images=self._inline_images(context),
        )

    def _inline_images(self, context: NotificationContext) -> list[InlineImage]:
        images: list[InlineImage] = []
        static_root = self._static_dir.resolve()
        for key in INLINE_IMAGE_KEYS:
            value = context.get(key, "")
            if not value.startswith(CID_PREFIX):
                continue
            content_id = value[len(CID_PREFIX):]
            path = (static_root / content_id).resolve()
            if not path.is_relative_to(static_root):
                logger.warning("Inline image %s is outside %s; skipping", content_id, static_root)
                continue
            if not path.is_file():
                logger.warning("Inline image %s not found in %s", content_id, self._static_dir)
                continue
            images.append(InlineImage(content_id=content_id, path=path))
        return images


__all__ = [
    "EmailDeliveryError",
    "InlineImage",
    "TemplateEmailSender",
    "send_email",
]
