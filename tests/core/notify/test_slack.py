"""
tests/core/notify/test_slack.py - Slack 전송 테스트
"""

from unittest.mock import patch

import pytest
import requests

from core.exceptions import NotificationError
from core.notify import SlackNotifier, publish_msg_in_thread


def _ok(ts="1700000000.000100", channel="C0123"):
    return {"ok": True, "ts": ts, "channel": channel}


class TestSlackNotifier:
    """SlackNotifier 테스트"""

    def test_default_channel(self):
        notifier = SlackNotifier("xoxb-test")
        assert notifier.channel == "#lakehouse-usage"
        assert notifier.timeout == 60

    def test_default_channel_from_env(self, monkeypatch):
        monkeypatch.setenv("SLACK_CHANNEL", "#data-ops")
        assert SlackNotifier("xoxb-test").channel == "#data-ops"

    @patch("core.notify.slack.requests.post")
    def test_post_message(self, mock_post, mock_response):
        mock_post.return_value = mock_response(json_data=_ok())

        result = SlackNotifier("xoxb-test", channel="#ops").post_message("hello")

        assert result["ts"] == "1700000000.000100"
        args, kwargs = mock_post.call_args
        assert args[0] == "https://slack.com/api/chat.postMessage"
        assert kwargs["json"] == {"channel": "#ops", "text": "hello"}
        assert kwargs["headers"]["Authorization"] == "Bearer xoxb-test"

    @patch("core.notify.slack.requests.post")
    def test_publish_in_thread(self, mock_post, mock_response):
        mock_post.return_value = mock_response(json_data=_ok())

        ts = SlackNotifier("xoxb-test", channel="#ops").publish_msg_in_thread("summary", "detail")

        assert ts == "1700000000.000100"
        assert mock_post.call_count == 2
        first = mock_post.call_args_list[0].kwargs["json"]
        second = mock_post.call_args_list[1].kwargs["json"]
        assert first == {"channel": "#ops", "text": "summary"}
        assert second == {"channel": "C0123", "text": "detail", "thread_ts": "1700000000.000100"}

    @patch("core.notify.slack.requests.post")
    def test_missing_token(self, mock_post):
        with pytest.raises(NotificationError):
            SlackNotifier("").publish_msg_in_thread("summary", "detail")

        mock_post.assert_not_called()

    @patch("core.notify.slack.requests.post")
    def test_slack_error_response(self, mock_post, mock_response):
        mock_post.return_value = mock_response(json_data={"ok": False, "error": "channel_not_found"})

        with pytest.raises(NotificationError) as exc_info:
            SlackNotifier("xoxb-test").publish_msg_in_thread("summary", "detail")

        assert exc_info.value.error_code == "channel_not_found"
        assert mock_post.call_count == 1

    @patch("core.notify.slack.requests.post")
    def test_reply_failure(self, mock_post, mock_response):
        """스레드 답글 실패도 오류"""
        mock_post.side_effect = [
            mock_response(json_data=_ok()),
            mock_response(json_data={"ok": False, "error": "msg_too_long"}),
        ]

        with pytest.raises(NotificationError) as exc_info:
            SlackNotifier("xoxb-test").publish_msg_in_thread("summary", "detail")

        assert exc_info.value.error_code == "msg_too_long"

    @patch("core.notify.slack.requests.post")
    def test_missing_ts(self, mock_post, mock_response):
        mock_post.return_value = mock_response(json_data={"ok": True})

        with pytest.raises(NotificationError):
            SlackNotifier("xoxb-test").publish_msg_in_thread("summary", "detail")

    @patch("core.notify.slack.requests.post")
    def test_http_error(self, mock_post, mock_response):
        response = mock_response(status_code=503)
        response.raise_for_status.side_effect = requests.HTTPError("503 Server Error")
        mock_post.return_value = response

        with pytest.raises(NotificationError) as exc_info:
            SlackNotifier("xoxb-test").publish_msg_in_thread("summary", "detail")

        assert isinstance(exc_info.value.cause, requests.HTTPError)

    @patch("core.notify.slack.requests.post")
    def test_timeout(self, mock_post):
        mock_post.side_effect = requests.Timeout("read timeout")

        with pytest.raises(NotificationError):
            SlackNotifier("xoxb-test", timeout=3).post_message("hello")

        assert mock_post.call_args.kwargs["timeout"] == 3


class TestPublishMsgInThread:
    """편의 함수 테스트"""

    @patch("core.notify.slack.requests.post")
    def test_convenience(self, mock_post, mock_response):
        mock_post.return_value = mock_response(json_data=_ok(ts="1.2"))

        assert publish_msg_in_thread("xoxb-test", "s", "d", channel="#ops") == "1.2"
        assert mock_post.call_args_list[0].kwargs["json"]["channel"] == "#ops"
