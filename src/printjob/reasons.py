"""Blocked/failed reason enumerations and their bitmask decoding."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

REASON_BITMASK_LIMIT = (1 << 64) - 1


class BlockedReason(IntEnum):
    """Bit positions of transient printer conditions."""

    UNABLE_TO_CONNECT = 0
    BUSY = 1
    CANCELLED = 2
    OUT_OF_PAPER = 3
    OUT_OF_INK = 4
    OUT_OF_TONER = 5
    JAMMED = 6
    DOOR_OPEN = 7
    SVC_REQUEST = 8
    PAUSED = 9
    STOPPED = 10
    LOW_ON_INK = 11
    LOW_ON_TONER = 12
    INPUT_CANNOT_FEED_SIZE_SELECTED = 13
    INTERLOCK_ERROR = 14
    OUTPUT_TRAY_MISSING = 15
    BANDER_ERROR = 16
    BINDER_ERROR = 17
    POWER_ERROR = 18
    CLEANER_ERROR = 19
    INPUT_TRAY_ERROR = 20
    INSERTER_ERROR = 21
    INTERPRETER_ERROR = 22
    MAKE_ENVELOPE_ERROR = 23
    MARKER_ERROR = 24
    MEDIA_ERROR = 25
    PERFORATER_ERROR = 26
    PUNCHER_ERROR = 27
    SEPARATION_CUTTER_ERROR = 28
    SHEET_ROTATOR_ERROR = 29
    SLITTER_ERROR = 30
    STACKER_ERROR = 31
    STAPLER_ERROR = 32
    STITCHER_ERROR = 33
    SUBUNIT_ERROR = 34
    TRIMMER_ERROR = 35
    WRAPPER_ERROR = 36
    CLIENT_ERROR = 37
    SERVER_ERROR = 38
    ALERT_REMOVAL_OF_BINARY_CHANGE_ENTRY = 39
    CONFIGURATION_CHANGED = 40
    CONNECTING_TO_DEVICE = 41
    DEACTIVATED = 42
    DEVELOPER_ERROR = 43
    HOLD_NEW_JOBS = 44
    OPC_LIFE_OVER = 45
    SPOOL_AREA_FULL = 46
    TIMED_OUT = 47
    SHUTDOWN = 48
    PRINTER_NMS_RESET = 49
    PRINTER_MANUAL_RESET = 50
    MAX_STATE = 51

    @property
    def mask(self) -> int:
        return 1 << self.value


class FailedReason(IntEnum):
    """Bit positions of terminal job failure conditions."""

    UNABLE_TO_CONNECT = 0
    ABORTED_BY_SYSTEM = 1
    UNSUPPORTED_COMPRESSION = 2
    COMPRESSION_ERROR = 3
    UNSUPPORTED_DOCUMENT_FORMAT = 4
    DOCUMENT_FORMAT_ERROR = 5
    SERVICE_OFFLINE = 6
    DOCUMENT_PASSWORD_ERROR = 7
    DOCUMENT_PERMISSION_ERROR = 8
    DOCUMENT_SECURITY_ERROR = 9
    DOCUMENT_UNPRINTABLE_ERROR = 10
    DOCUMENT_ACCESS_ERROR = 11
    SUBMISSION_INTERRUPTED = 12
    AUTHORIZATION_FAILED = 13
    ACCOUNT_CLOSED = 14
    ACCOUNT_INFO_NEEDED = 15
    ACCOUNT_LIMIT_REACHED = 16
    MAX_VALUE = 17

    @property
    def mask(self) -> int:
        return 1 << self.value


class ReasonSymbol:
    """Reason keywords reported to job listeners."""

    OFFLINE = "device-offline"
    BUSY = "device-busy"
    CANCELLED = "print-job-cancelled"
    OUT_OF_PAPER = "input-media-supply-empty"
    OUT_OF_INK = "marker-ink-empty"
    OUT_OF_TONER = "marker-toner-empty"
    JAMMED = "jam"
    DOOR_OPEN = "opened"
    SERVICE_REQUEST = "service-request"
    PAUSED = "paused"
    STOPPED = "stopped"
    LOW_ON_INK = "marker-ink-almost-empty"
    LOW_ON_TONER = "marker-toner-almost-empty"
    INPUT_CANNOT_FEED_SIZE_SELECTED = "input-cannot-feed-size-selected"
    INTERLOCK_ERROR = "interlock-error"
    OUTPUT_TRAY_MISSING = "output-tray-missing"
    BANDER_ERROR = "bander-error"
    BINDER_ERROR = "binder-error"
    POWER_ERROR = "power-error"
    CLEANER_ERROR = "cleaner-error"
    INPUT_TRAY_ERROR = "input-tray-error"
    INSERTER_ERROR = "inserter-error"
    INTERPRETER_ERROR = "interpreter-error"
    MAKE_ENVELOPE_ERROR = "make-envelope-error"
    MARKER_ERROR = "marker-error"
    MEDIA_ERROR = "media-error"
    PERFORATER_ERROR = "perforater-error"
    PUNCHER_ERROR = "puncher-error"
    SEPARATION_CUTTER_ERROR = "separation-cutter-error"
    SHEET_ROTATOR_ERROR = "sheet-rotator-error"
    SLITTER_ERROR = "slitter-error"
    STACKER_ERROR = "stacker-error"
    STAPLER_ERROR = "stapler-error"
    STITCHER_ERROR = "stitcher-error"
    SUBUNIT_ERROR = "subunit-error"
    TRIMMER_ERROR = "trimmer-error"
    WRAPPER_ERROR = "wrapper-error"
    CLIENT_ERROR = "client-error"
    SERVER_ERROR = "server-error"
    ALERT_REMOVAL_OF_BINARY_CHANGE_ENTRY = "alert-removal-of-binary-change-entry"
    CONFIGURATION_CHANGED = "configuration-changed"
    CONNECTING_TO_DEVICE = "connecting-to-device"
    DEVELOPER_ERROR = "developer-error"
    HOLD_NEW_JOBS = "hold-new-jobs"
    OPC_LIFE_OVER = "opc-life-over"
    SPOOL_AREA_FULL = "spool-area-full"
    TIMED_OUT = "timed-out"
    SHUTDOWN = "shutdown"
    PRINTER_MANUAL_RESET = "printer-manual-reset"
    PRINTER_NMS_RESET = "printer-nms-reset"

    ABORTED_BY_SYSTEM = "aborted-by-system"
    UNSUPPORTED_COMPRESSION = "unsupported-compression"
    COMPRESSION_ERROR = "compression-error"
    UNSUPPORTED_DOCUMENT_FORMAT = "unsupported-document-format"
    DOCUMENT_FORMAT_ERROR = "document-format-error"
    SERVICE_OFFLINE = "service-off-line"
    DOCUMENT_PASSWORD_ERROR = "document-password-error"
    DOCUMENT_PERMISSION_ERROR = "document-permission-error"
    DOCUMENT_SECURITY_ERROR = "document-security-error"
    DOCUMENT_UNPRINTABLE_ERROR = "document-unprintable-error"
    DOCUMENT_ACCESS_ERROR = "document-access-error"
    SUBMISSION_INTERRUPTED = "submission-interrupted"
    AUTHORIZATION_FAILED = "job-authorization-failed"
    ACCOUNT_CLOSED = "account-closed"
    ACCOUNT_INFO_NEEDED = "account-info-needed"
    ACCOUNT_LIMIT_REACHED = "account-limit-reached"


ReasonTable = Tuple[Tuple[int, str], ...]

# Checked top to bottom against the remaining bits on every set bit, so table
# order decides the symbol when entries are out of bit order (the two reset
# entries are). DEACTIVATED has no symbol.
BLOCKED_REASON_TABLE: ReasonTable = (
    (BlockedReason.UNABLE_TO_CONNECT.mask, ReasonSymbol.OFFLINE),
    (BlockedReason.BUSY.mask, ReasonSymbol.BUSY),
    (BlockedReason.CANCELLED.mask, ReasonSymbol.CANCELLED),
    (BlockedReason.OUT_OF_PAPER.mask, ReasonSymbol.OUT_OF_PAPER),
    (BlockedReason.OUT_OF_INK.mask, ReasonSymbol.OUT_OF_INK),
    (BlockedReason.OUT_OF_TONER.mask, ReasonSymbol.OUT_OF_TONER),
    (BlockedReason.JAMMED.mask, ReasonSymbol.JAMMED),
    (BlockedReason.DOOR_OPEN.mask, ReasonSymbol.DOOR_OPEN),
    (BlockedReason.SVC_REQUEST.mask, ReasonSymbol.SERVICE_REQUEST),
    (BlockedReason.PAUSED.mask, ReasonSymbol.PAUSED),
    (BlockedReason.STOPPED.mask, ReasonSymbol.STOPPED),
    (BlockedReason.LOW_ON_INK.mask, ReasonSymbol.LOW_ON_INK),
    (BlockedReason.LOW_ON_TONER.mask, ReasonSymbol.LOW_ON_TONER),
    (BlockedReason.INPUT_CANNOT_FEED_SIZE_SELECTED.mask, ReasonSymbol.INPUT_CANNOT_FEED_SIZE_SELECTED),
    (BlockedReason.INTERLOCK_ERROR.mask, ReasonSymbol.INTERLOCK_ERROR),
    (BlockedReason.OUTPUT_TRAY_MISSING.mask, ReasonSymbol.OUTPUT_TRAY_MISSING),
    (BlockedReason.BANDER_ERROR.mask, ReasonSymbol.BANDER_ERROR),
    (BlockedReason.BINDER_ERROR.mask, ReasonSymbol.BINDER_ERROR),
    (BlockedReason.POWER_ERROR.mask, ReasonSymbol.POWER_ERROR),
    (BlockedReason.CLEANER_ERROR.mask, ReasonSymbol.CLEANER_ERROR),
    (BlockedReason.INPUT_TRAY_ERROR.mask, ReasonSymbol.INPUT_TRAY_ERROR),
    (BlockedReason.INSERTER_ERROR.mask, ReasonSymbol.INSERTER_ERROR),
    (BlockedReason.INTERPRETER_ERROR.mask, ReasonSymbol.INTERPRETER_ERROR),
    (BlockedReason.MAKE_ENVELOPE_ERROR.mask, ReasonSymbol.MAKE_ENVELOPE_ERROR),
    (BlockedReason.MARKER_ERROR.mask, ReasonSymbol.MARKER_ERROR),
    (BlockedReason.MEDIA_ERROR.mask, ReasonSymbol.MEDIA_ERROR),
    (BlockedReason.PERFORATER_ERROR.mask, ReasonSymbol.PERFORATER_ERROR),
    (BlockedReason.PUNCHER_ERROR.mask, ReasonSymbol.PUNCHER_ERROR),
    (BlockedReason.SEPARATION_CUTTER_ERROR.mask, ReasonSymbol.SEPARATION_CUTTER_ERROR),
    (BlockedReason.SHEET_ROTATOR_ERROR.mask, ReasonSymbol.SHEET_ROTATOR_ERROR),
    (BlockedReason.SLITTER_ERROR.mask, ReasonSymbol.SLITTER_ERROR),
    (BlockedReason.STACKER_ERROR.mask, ReasonSymbol.STACKER_ERROR),
    (BlockedReason.STAPLER_ERROR.mask, ReasonSymbol.STAPLER_ERROR),
    (BlockedReason.STITCHER_ERROR.mask, ReasonSymbol.STITCHER_ERROR),
    (BlockedReason.SUBUNIT_ERROR.mask, ReasonSymbol.SUBUNIT_ERROR),
    (BlockedReason.TRIMMER_ERROR.mask, ReasonSymbol.TRIMMER_ERROR),
    (BlockedReason.WRAPPER_ERROR.mask, ReasonSymbol.WRAPPER_ERROR),
    (BlockedReason.CLIENT_ERROR.mask, ReasonSymbol.CLIENT_ERROR),
    (BlockedReason.SERVER_ERROR.mask, ReasonSymbol.SERVER_ERROR),
    (
        BlockedReason.ALERT_REMOVAL_OF_BINARY_CHANGE_ENTRY.mask,
        ReasonSymbol.ALERT_REMOVAL_OF_BINARY_CHANGE_ENTRY,
    ),
    (BlockedReason.CONFIGURATION_CHANGED.mask, ReasonSymbol.CONFIGURATION_CHANGED),
    (BlockedReason.CONNECTING_TO_DEVICE.mask, ReasonSymbol.CONNECTING_TO_DEVICE),
    (BlockedReason.DEVELOPER_ERROR.mask, ReasonSymbol.DEVELOPER_ERROR),
    (BlockedReason.HOLD_NEW_JOBS.mask, ReasonSymbol.HOLD_NEW_JOBS),
    (BlockedReason.OPC_LIFE_OVER.mask, ReasonSymbol.OPC_LIFE_OVER),
    (BlockedReason.SPOOL_AREA_FULL.mask, ReasonSymbol.SPOOL_AREA_FULL),
    (BlockedReason.TIMED_OUT.mask, ReasonSymbol.TIMED_OUT),
    (BlockedReason.SHUTDOWN.mask, ReasonSymbol.SHUTDOWN),
    (BlockedReason.PRINTER_MANUAL_RESET.mask, ReasonSymbol.PRINTER_MANUAL_RESET),
    (BlockedReason.PRINTER_NMS_RESET.mask, ReasonSymbol.PRINTER_NMS_RESET),
)

FAILED_REASON_TABLE: ReasonTable = (
    (FailedReason.UNABLE_TO_CONNECT.mask, ReasonSymbol.OFFLINE),
    (FailedReason.ABORTED_BY_SYSTEM.mask, ReasonSymbol.ABORTED_BY_SYSTEM),
    (FailedReason.UNSUPPORTED_COMPRESSION.mask, ReasonSymbol.UNSUPPORTED_COMPRESSION),
    (FailedReason.COMPRESSION_ERROR.mask, ReasonSymbol.COMPRESSION_ERROR),
    (FailedReason.UNSUPPORTED_DOCUMENT_FORMAT.mask, ReasonSymbol.UNSUPPORTED_DOCUMENT_FORMAT),
    (FailedReason.DOCUMENT_FORMAT_ERROR.mask, ReasonSymbol.DOCUMENT_FORMAT_ERROR),
    (FailedReason.SERVICE_OFFLINE.mask, ReasonSymbol.SERVICE_OFFLINE),
    (FailedReason.DOCUMENT_PASSWORD_ERROR.mask, ReasonSymbol.DOCUMENT_PASSWORD_ERROR),
    (FailedReason.DOCUMENT_PERMISSION_ERROR.mask, ReasonSymbol.DOCUMENT_PERMISSION_ERROR),
    (FailedReason.DOCUMENT_SECURITY_ERROR.mask, ReasonSymbol.DOCUMENT_SECURITY_ERROR),
    (FailedReason.DOCUMENT_UNPRINTABLE_ERROR.mask, ReasonSymbol.DOCUMENT_UNPRINTABLE_ERROR),
    (FailedReason.DOCUMENT_ACCESS_ERROR.mask, ReasonSymbol.DOCUMENT_ACCESS_ERROR),
    (FailedReason.SUBMISSION_INTERRUPTED.mask, ReasonSymbol.SUBMISSION_INTERRUPTED),
    (FailedReason.AUTHORIZATION_FAILED.mask, ReasonSymbol.AUTHORIZATION_FAILED),
    (FailedReason.ACCOUNT_CLOSED.mask, ReasonSymbol.ACCOUNT_CLOSED),
    (FailedReason.ACCOUNT_INFO_NEEDED.mask, ReasonSymbol.ACCOUNT_INFO_NEEDED),
    (FailedReason.ACCOUNT_LIMIT_REACHED.mask, ReasonSymbol.ACCOUNT_LIMIT_REACHED),
)


def count_reason_bits(bits: int, bound: int) -> int:
    """Number of set bits below ``bound``."""
    return sum(1 for i in range(bound) if bits & (1 << i))


def decode_reasons(
    bits: int,
    bound: int,
    table: Sequence[Tuple[int, str]],
    expected_count: Optional[int] = None,
) -> Tuple[str, ...]:
    """
    Translate a reason bitmask into reason symbols, in bit order.

    Every set bit below ``bound`` takes the first table entry matching any
    bit still set, then is cleared. Bits without a symbol add nothing. When
    ``expected_count`` is given, at most that many symbols are returned.
    """
    remaining = int(bits) & REASON_BITMASK_LIMIT
    symbols = []
    for i in range(bound):
        bit = 1 << i
        if remaining & bit:
            symbol = next((sym for mask, sym in table if remaining & mask), None)
            if symbol is not None:
                symbols.append(symbol)
        remaining &= ~bit

    if expected_count is not None and len(symbols) > expected_count:
        logger.debug("dropping %s reasons past capacity %s", len(symbols) - expected_count, expected_count)
        symbols = symbols[:expected_count]
    return tuple(symbols)


def decode_blocked_reasons(bits: int) -> Tuple[str, ...]:
    return decode_reasons(
        bits,
        BlockedReason.MAX_STATE,
        BLOCKED_REASON_TABLE,
        count_reason_bits(bits, BlockedReason.MAX_STATE),
    )


def decode_failed_reasons(bits: int) -> Tuple[str, ...]:
    return decode_reasons(
        bits,
        FailedReason.MAX_VALUE,
        FAILED_REASON_TABLE,
        count_reason_bits(bits, FailedReason.MAX_VALUE),
    )
