"""Use cases for notice distribution and read state."""

from .access import assert_can_delete, assert_can_toggle_read, can_view
from .create_notice import create_notice, fan_out_notice
from .delete_notice import delete_notice
from .list_notices import get_notice, list_inbox, list_sent
from .read_state import (
    count_unread_notices,
    mark_all_notices_read,
    mark_notice_read,
    mark_notice_unread,
)
from .recipient_directory import (
    GroupSummary,
    RecipientDirectory,
    list_recipient_candidates,
)
from .recipients import build_recipients, partition_recipients

__all__ = [
    "GroupSummary",
    "RecipientDirectory",
    "assert_can_delete",
    "assert_can_toggle_read",
    "build_recipients",
    "can_view",
    "count_unread_notices",
    "create_notice",
    "delete_notice",
    "fan_out_notice",
    "get_notice",
    "list_inbox",
    "list_recipient_candidates",
    "list_sent",
    "mark_all_notices_read",
    "mark_notice_read",
    "mark_notice_unread",
    "partition_recipients",
]
