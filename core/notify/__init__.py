# core/notify - 알림 전송
"""
Slack 알림 모듈

Usage:
    from core.notify import SlackNotifier, publish_msg_in_thread
"""

from .slack import SlackNotifier, publish_msg_in_thread

__all__ = ["SlackNotifier", "publish_msg_in_thread"]
