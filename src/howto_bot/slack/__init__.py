"""Slack ingress: webhook handling, signature verification, and replies."""

from howto_bot.slack.client import get_slack_client, reset_client
from howto_bot.slack.notifier import post_reply
from howto_bot.slack.router import router
from howto_bot.slack.verification import SlackVerificationError

__all__ = [
    "SlackVerificationError",
    "get_slack_client",
    "post_reply",
    "reset_client",
    "router",
]
