"""Result contract between CodecService and the CLI.

A codec call either yields its converted output with size counters, or a
ServiceError flattened from the CodecError that stopped it. Codec errors
never leave a service as exceptions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from binctl.domain.errors import CodecError

Op = Literal["encode", "decode"]


class ServiceError(BaseModel):
    """A CodecError as data: its ``code``, message and ``detail()``."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_codec_error(cls, exc: CodecError) -> ServiceError:
        return cls(code=exc.code, message=str(exc), detail=exc.detail())


class ServiceResult(BaseModel):
    """Outcome of one ``encode`` or ``decode`` call.

    On success ``data`` holds ``output`` (the converted text), ``bytes`` and
    ``bits``; on failure it is empty and ``error`` is set. ``meta`` carries
    stage counters only when the caller asked for them.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    op: Op
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @property
    def output(self) -> str:
        return str(self.data.get("output", ""))
