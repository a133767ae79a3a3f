"""
core/notify/slack.py - Slack 메시지 전송

Slack Web API chat.postMessage로 요약 메시지를 보내고,
상세 내용을 해당 메시지의 스레드 답글로 추가합니다.

Usage:
    from core.notify import SlackNotifier

    notifier = SlackNotifier(token, channel="#lakehouse-usage")
    notifier.publish_msg_in_thread("요약", "상세")
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from core.config import get_default_slack_channel, settings
from core.exceptions import NotificationError

logger = logging.getLogger(__name__)


class SlackNotifier:
    """Slack 채널 전송기

    Attributes:
        channel: 채널 이름 또는 ID
        timeout: 요청 타임아웃 (초)
    """

    def __init__(
        self,
        token: str,
        channel: str | None = None,
        timeout: int | None = None,
        api_url: str | None = None,
    ) -> None:
        self._token = token
        self.channel = channel or get_default_slack_channel()
        self.timeout = timeout or settings.HTTP_TIMEOUT
        self._api_url = (api_url or settings.SLACK_API_URL).rstrip("/")

    def _call(self, method: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Web API 호출 후 ok 필드 검증"""
        try:
            response = requests.post(
                f"{self._api_url}/{method}",
                json=payload,
                headers={"Authorization": f"Bearer {self._token}"},
                timeout=self.timeout,
            )
            response.raise_for_status()
            body: dict[str, Any] = response.json()
        except requests.RequestException as e:
            raise NotificationError(f"{method} 요청 실패", cause=e) from e
        except ValueError as e:
            raise NotificationError(f"{method} 응답 파싱 실패", cause=e) from e

        if not body.get("ok"):
            raise NotificationError(method, error_code=body.get("error", "unknown_error"))

        if body.get("warning"):
            logger.warning("Slack %s 경고: %s", method, body["warning"])
        return body

    def post_message(self, text: str, thread_ts: str | None = None, channel: str | None = None) -> dict[str, Any]:
        """메시지 전송

        Args:
            text: 메시지 본문 (mrkdwn)
            thread_ts: 답글을 달 부모 메시지 ts
            channel: 채널 (None이면 self.channel)

        Returns:
            Slack 응답 ({"ok": True, "channel": ..., "ts": ...})
        """
        payload: dict[str, Any] = {"channel": channel or self.channel, "text": text}
        if thread_ts:
            payload["thread_ts"] = thread_ts
        return self._call("chat.postMessage", payload)

    def publish_msg_in_thread(self, summary: str, detail: str) -> str:
        """요약 메시지 전송 후 상세 내용을 스레드 답글로 추가

        Returns:
            부모 메시지 ts

        Raises:
            NotificationError: 토큰 누락 또는 전송 실패
        """
        if not self._token:
            raise NotificationError("Slack 토큰이 설정되지 않음 (--slack-token 또는 SLACK_TOKEN)")

        parent = self.post_message(summary)
        thread_ts = parent.get("ts")
        if not thread_ts:
            raise NotificationError("chat.postMessage 응답에 ts 없음")

        # 채널 이름 대신 응답의 채널 ID 사용
        self.post_message(detail, thread_ts=thread_ts, channel=parent.get("channel"))
        logger.info("Slack 전송 완료: %s (ts=%s)", self.channel, thread_ts)
        return str(thread_ts)


# =============================================================================
# 편의 함수
# =============================================================================


def publish_msg_in_thread(
    token: str,
    summary: str,
    detail: str,
    channel: str | None = None,
    timeout: int | None = None,
) -> str:
    """요약 + 스레드 상세 전송 (편의 함수)"""
    return SlackNotifier(token, channel=channel, timeout=timeout).publish_msg_in_thread(summary, detail)
