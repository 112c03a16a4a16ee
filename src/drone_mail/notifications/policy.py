from __future__ import annotations

from typing import Optional

SUCCESS = "success"
FAILURE = "failure"


def is_recovery(status: Optional[str], prev_status: Optional[str]) -> bool:
    return status == SUCCESS and prev_status == FAILURE


def should_send(
    status: Optional[str],
    prev_status: Optional[str],
    always_send: Optional[str] = None,
) -> bool:
    """Notify on every failure and on the first success after one.

    ``always_send`` counts as set for any value other than ``None``, including
    strings such as ``"false"``.
    """
    if always_send is not None:
        return True
    return is_recovery(status, prev_status) or status == FAILURE


def status_text(status: Optional[str]) -> str:
    return "succeeded" if status == SUCCESS else "failed"
