"""CodecService — encode and decode pipelines.

encode: READ TEXT → WRAP BYTES → WRITE DIGITS
decode: READ DIGITS → DECODE TEXT → WRITE TEXT

Domain errors are caught here and reported as ``ok=False`` results; no
partial output is ever returned. Each step runs as a stage of a
:class:`~binctl.services.stages.StageLog`.
"""

from __future__ import annotations

import logging
from io import BytesIO
from typing import TYPE_CHECKING

from binctl.domain.conversion import bin_from_str, str_from_bin
from binctl.domain.errors import CodecError
from binctl.domain.messages import BinMsg, Message, StrMsg
from binctl.services.result import Op, ServiceError, ServiceResult
from binctl.services.stages import StageLog

if TYPE_CHECKING:
    from typing import BinaryIO

logger = logging.getLogger(__name__)


class CodecService:
    """Converts between text and binary-digit strings.

    Args:
        report_stages: Attach per-stage counters to ``ServiceResult.meta``.
    """

    def __init__(self, *, report_stages: bool = False) -> None:
        self.report_stages = report_stages

    def encode(self, source: BinaryIO) -> ServiceResult:
        """Encode text from *source* as a digit string."""
        log = StageLog("encode")
        try:
            with log.stage("read_text", "chars") as stage:
                text_msg = StrMsg.read(source)
                stage.count = len(text_msg.text)
            with log.stage("wrap_bytes", "bytes") as stage:
                bin_msg = bin_from_str(text_msg)
                stage.count = len(bin_msg.data)
        except CodecError as exc:
            return self._failure("encode", exc, log)

        with log.stage("write_digits", "digits") as stage:
            output = _render(bin_msg)
            stage.count = len(output)
        return self._success("encode", output, bin_msg, log)

    def decode(self, source: BinaryIO) -> ServiceResult:
        """Decode a digit string from *source* back to text."""
        log = StageLog("decode")
        try:
            with log.stage("read_digits", "bytes") as stage:
                bin_msg = BinMsg.read(source)
                stage.count = len(bin_msg.data)
            with log.stage("decode_text", "chars") as stage:
                text_msg = str_from_bin(bin_msg)
                stage.count = len(text_msg.text)
        except CodecError as exc:
            return self._failure("decode", exc, log)

        with log.stage("write_text", "bytes") as stage:
            output = _render(text_msg)
            stage.count = len(bin_msg.data)
        return self._success("decode", output, bin_msg, log)

    def _success(self, op: Op, output: str, bin_msg: BinMsg, log: StageLog) -> ServiceResult:
        logger.debug("%s: %d bytes, %d bits", op, len(bin_msg.data), bin_msg.bit_count)
        return ServiceResult(
            ok=True,
            op=op,
            data={"output": output, "bytes": len(bin_msg.data), "bits": bin_msg.bit_count},
            meta=log.to_meta() if self.report_stages else None,
        )

    def _failure(self, op: Op, exc: CodecError, log: StageLog) -> ServiceResult:
        logger.debug("%s failed in %s: %s", op, log.failed_stage, exc)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError.from_codec_error(exc),
            meta=log.to_meta() if self.report_stages else None,
        )


def _render(msg: Message) -> str:
    """Serialize *msg* through its ``write`` operation and return the text."""
    sink = BytesIO()
    msg.write(sink)
    return sink.getvalue().decode("utf-8")
