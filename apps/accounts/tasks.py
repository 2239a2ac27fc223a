"""Celery tasks for account notifications."""

from __future__ import annotations

import logging

from celery import shared_task  # type: ignore
from django.conf import settings  # type: ignore
from django.contrib.auth import get_user_model  # type: ignore
from django.core.mail import send_mail  # type: ignore

logger = logging.getLogger(__name__)


@shared_task(name="accounts.send_otp_email")
def send_otp_email(account_id: int, otp: str) -> bool:
    """Email a password-reset code to the account holder."""

    User = get_user_model()
    try:
        account = User.objects.get(pk=account_id)
    except User.DoesNotExist:
        logger.warning("OTP email skipped, account %s no longer exists", account_id)
        return False

    minutes = int(settings.OTP_LIFETIME.total_seconds() // 60)
    send_mail(
        subject="Your Horoo password reset code",
        message=(
            f"Hello {account.name},\n\n"
            f"Your password reset code is {otp}. It expires in {minutes} minutes.\n"
            "If you did not request a reset, you can ignore this email."
        ),
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=[account.email],
    )
    logger.info("OTP email sent to account %s", account_id)
    return True
