from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from ..common.datetime_utils import Clock, now_local
from ..common.fanout import run_all_settled
from ..common.validators import clean_recipient_id, require_non_empty
from ..core.constants import DEFAULT_FANOUT_WORKERS, DEFAULT_UNREAD_LIMIT, SYSTEM_SENDER
from ..core.exceptions import DomainError, FetchFailure
from ..users.repository import UserRepository
from ..users.session import SessionContext
from .formatting import badge_text
from .model import FanOutResult, Notification
from .payloads import NotificationPayload
from .repository import NotificationRepository, PushRepository

logger = logging.getLogger(__name__)


class NotificationService:
    """Notification center: store, fan out, read/unread state."""

    def __init__(
        self,
        notifications: NotificationRepository,
        push: PushRepository,
        users: UserRepository,
        *,
        clock: Optional[Clock] = None,
        max_workers: int = DEFAULT_FANOUT_WORKERS,
    ):
        self._notifications = notifications
        self._push = push
        self._users = users
        self._clock = clock or now_local
        self._max_workers = int(max_workers)

    def send_to_user(
        self,
        sender: Optional[SessionContext],
        recipient_id: object,
        payload: NotificationPayload,
        *,
        data: Optional[dict] = None,
    ) -> bool:
        """Store the notification and queue a push when the recipient is subscribed.

        Returns False (never raises) when the id is invalid or storage fails.
        A failed push enqueue is logged; the send still counts as delivered.
        """

        rid = clean_recipient_id(recipient_id)
        if rid is None:
            logger.warning("invalid recipient id: %r", recipient_id)
            return False

        rendered = payload.render()
        now = self._clock()
        data = dict(data or {})
        try:
            self._notifications.add(
                recipient_id=rid,
                title=rendered.title,
                body=rendered.body,
                category=rendered.category,
                data=data,
                sender_name=sender.sender_name if sender else SYSTEM_SENDER,
                sender_id=sender.user_id if sender else SYSTEM_SENDER.lower(),
                created_at=now,
            )
        except DomainError as e:
            logger.error("sending notification to %s failed: %s", rid, e)
            return False

        # Stored from here on; push is best effort.
        try:
            player_id = self._push.get_player_id(rid)
            if player_id:
                self._push.enqueue(
                    player_id=player_id,
                    recipient_id=rid,
                    title=rendered.title,
                    message=rendered.body,
                    data=data,
                    created_at=now,
                )
                logger.info("push queued for %s", rid)
            else:
                logger.debug("recipient %s has no push subscription", rid)
        except DomainError as e:
            logger.error("queueing push for %s failed: %s", rid, e)

        return True

    def send_bulk(
        self,
        sender: Optional[SessionContext],
        recipient_ids: Iterable[str],
        payload: NotificationPayload,
        *,
        data: Optional[dict] = None,
    ) -> FanOutResult:
        results = run_all_settled(
            lambda rid: self.send_to_user(sender, rid, payload, data=data),
            list(recipient_ids),
            max_workers=self._max_workers,
        )
        sent = tuple(str(r.key) for r in results if r.ok and r.value)
        failed = tuple(str(r.key) for r in results if not (r.ok and r.value))

        logger.info("notifications sent: %d/%d", len(sent), len(results))
        return FanOutResult(sent=sent, failed=failed)

    def notify_group(
        self,
        sender: Optional[SessionContext],
        grade: int,
        section: str,
        payload: NotificationPayload,
    ) -> FanOutResult:
        section = require_non_empty(section, "Grupo")
        try:
            recipient_ids = self._users.list_ids_for_group(grade, section)
        except FetchFailure as e:
            logger.error("could not resolve group %s%s: %s", grade, section, e)
            return FanOutResult()

        if not recipient_ids:
            logger.info("no recipients in group %s%s", grade, section)
            return FanOutResult()

        return self.send_bulk(sender, recipient_ids, payload)

    def unread(self, ctx: SessionContext, *, limit: int = DEFAULT_UNREAD_LIMIT) -> List[Notification]:
        return list(self._notifications.list_unread(ctx.user_id, limit=int(limit)))

    def unread_badge(self, ctx: SessionContext) -> str:
        return badge_text(len(self.unread(ctx)))

    def mark_read(self, ctx: SessionContext, notification_id: int) -> bool:
        return self._notifications.mark_read(
            recipient_id=ctx.user_id,
            notification_id=int(notification_id),
            read_at=self._clock(),
        )

    def mark_all_read(self, ctx: SessionContext) -> int:
        return self._notifications.mark_all_read(recipient_id=ctx.user_id, read_at=self._clock())


class PushService:
    """Registry of push-provider subscriptions for the logged-in user."""

    def __init__(self, push: PushRepository, *, clock: Optional[Clock] = None):
        self._push = push
        self._clock = clock or now_local

    def register(self, ctx: SessionContext, player_id: str) -> None:
        player_id = require_non_empty(player_id, "Player ID")
        self._push.save_player_id(user_id=ctx.user_id, player_id=player_id, updated_at=self._clock())
        logger.info("push subscription saved for %s", ctx.user_id)

    def unregister(self, ctx: SessionContext) -> None:
        self._push.clear_player_id(user_id=ctx.user_id)
        logger.info("push subscription removed for %s", ctx.user_id)

    def is_enabled(self, ctx: SessionContext) -> bool:
        return bool(self._push.get_player_id(ctx.user_id))
